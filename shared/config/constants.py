"""
Centralized constants for the backend application.

Usage:
    from shared.config.constants import DbProviders, AuditActions, Limits

    if provider not in DbProviders.ALL:
        ...
"""

from typing import Final


# =============================================================================
# Database Providers
# =============================================================================


class DbProviders:
    """Values accepted in the X-DB-Provider header."""

    POSTGRESQL: Final[str] = "postgresql"
    MYSQL: Final[str] = "mysql"
    SQLSERVER: Final[str] = "sqlserver"

    ALL: Final[list[str]] = [POSTGRESQL, MYSQL, SQLSERVER]


DB_PROVIDER_HEADER: Final[str] = "X-DB-Provider"


# =============================================================================
# Audit
# =============================================================================


class AuditActions:
    """Actions recorded in the audit log."""

    CREATE: Final[str] = "CREATE"
    UPDATE: Final[str] = "UPDATE"
    SOFT_DELETE: Final[str] = "SOFT_DELETE"
    DELETE: Final[str] = "DELETE"
    RESTORE: Final[str] = "RESTORE"

    ALL: Final[list[str]] = [CREATE, UPDATE, SOFT_DELETE, DELETE, RESTORE]


# =============================================================================
# Person Catalogs
# =============================================================================


class DocumentTypes:
    """Identity document types accepted for a person."""

    RC: Final[str] = "RC"  # Registro civil
    TI: Final[str] = "TI"  # Tarjeta de identidad
    CC: Final[str] = "CC"  # Cédula de ciudadanía
    CE: Final[str] = "CE"  # Cédula de extranjería
    NIT: Final[str] = "NIT"
    PP: Final[str] = "PP"  # Pasaporte

    ALL: Final[list[str]] = [RC, TI, CC, CE, NIT, PP]


class BloodTypes:
    """Blood types accepted for a person."""

    ALL: Final[list[str]] = ["A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-"]


# =============================================================================
# Validation Limits
# =============================================================================


class Limits:
    """Validation limits."""

    # String lengths (mirror the column sizes)
    MAX_PERSON_NAME_LENGTH: Final[int] = 30
    MAX_EMAIL_LENGTH: Final[int] = 100
    MAX_DOCUMENT_NUMBER_LENGTH: Final[int] = 10
    MAX_PHONE_LENGTH: Final[int] = 15
    MAX_ADDRESS_LENGTH: Final[int] = 100
    MAX_USERNAME_LENGTH: Final[int] = 50
    MAX_PASSWORD_LENGTH: Final[int] = 100
    MAX_NAME_LENGTH: Final[int] = 50
    MAX_DESCRIPTION_LENGTH: Final[int] = 200
    MAX_QR_LENGTH: Final[int] = 255

    # Pagination defaults
    DEFAULT_PAGE_SIZE: Final[int] = 50
    MAX_PAGE_SIZE: Final[int] = 200
    DEFAULT_OFFSET: Final[int] = 0
