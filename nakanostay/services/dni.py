"""Ecuadorian national identity number (cédula) validation."""

import re

_DNI_PATTERN = re.compile(r"[0-9]{10}")

# Province codes run 01-24; 30 is reserved for Ecuadorians registered abroad.
_MAX_PROVINCE_CODE = 24
_FOREIGN_PROVINCE_CODE = 30


def is_valid_ecuadorian_dni(dni: str) -> bool:
    """Return True if ``dni`` is a well-formed cédula with a correct check digit.

    The check digit is the 10th digit. Over the first nine digits, digits at
    even positions are doubled (minus 9 when the result exceeds 9) and digits
    at odd positions are kept; the check digit brings the sum up to the next
    multiple of ten.
    """
    if not _DNI_PATTERN.fullmatch(dni):
        return False

    province_code = int(dni[:2])
    # Codes above 24 other than 30 are rejected; 00 fails the lower bound.
    if province_code < 1 or (province_code > _MAX_PROVINCE_CODE and province_code != _FOREIGN_PROVINCE_CODE):
        return False

    digits = [int(char) for char in dni]
    checksum = 0
    for index, digit in enumerate(digits[:9]):
        if index % 2 == 0:
            digit *= 2
            if digit > 9:
                digit -= 9
        checksum += digit

    expected = 0 if checksum % 10 == 0 else 10 - checksum % 10
    return digits[9] == expected
