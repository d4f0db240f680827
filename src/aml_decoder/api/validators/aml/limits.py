"""Limites de domínio para campos AML."""

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)
CONFIDENCE_PERCENT_RANGE = (0, 100)
CONFIDENCE_FRACTION_RANGE = (0.0, 1.0)
BEARING_RANGE = (0.0, 360.0)
MIN_ACCURACY = 0.0
MIN_SPEED = 0.0

# Identificadores (apenas formato, sem validação de identidade)
IMEI_PATTERN = r"\d{14,16}"
IMSI_PATTERN = r"\d{5,15}"
ICCID_PATTERN = r"\d{18,22}F?"
PHONE_NUMBER_PATTERN = r"\+?\d{2,15}"
MCC_PATTERN = r"\d{3}"
MNC_PATTERN = r"\d{2,3}"
