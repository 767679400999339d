from typing import Any, Dict, Optional


class ErrorCodes:
    """Numeric codes attached to export errors"""
    CONFIG_FILE_NOT_FOUND = 1001
    CONFIG_VALIDATION_FAILED = 1002
    ARTIFACT_NOT_FOUND = 2001
    ARTIFACT_INVALID = 2002
    EXPORT_WRITE_FAILED = 3001


class ContractExportError(Exception):
    """Base exception class for contract export"""

    default_code: Optional[int] = None

    def __init__(self, message: str, code: int = None, **details: Any):
        self.message = message
        self.code = code if code is not None else self.default_code
        self.details: Dict[str, Any] = details
        super().__init__(message)

    def __str__(self) -> str:
        if self.code is not None:
            return f"[{self.code}] {self.message}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": type(self).__name__,
            "message": self.message,
            "code": self.code,
            "details": self.details,
        }


class ConfigurationError(ContractExportError):
    """Invalid or missing export configuration"""
    default_code = ErrorCodes.CONFIG_VALIDATION_FAILED

    def __init__(self, message: str, config_file: str = None, field: str = None,
                 code: int = None):
        details = {}
        if config_file is not None:
            details["config_file"] = config_file
        if field is not None:
            details["field"] = field
        super().__init__(message, code=code, **details)


class ArtifactNotFoundError(ContractExportError):
    """Build artifact file does not exist"""
    default_code = ErrorCodes.ARTIFACT_NOT_FOUND

    def __init__(self, message: str, contract: str = None, path: str = None):
        super().__init__(message, contract=contract, path=path)


class ArtifactFormatError(ContractExportError):
    """Build artifact could not be parsed or lacks abi/bytecode"""
    default_code = ErrorCodes.ARTIFACT_INVALID

    def __init__(self, message: str, contract: str = None, path: str = None):
        super().__init__(message, contract=contract, path=path)


class ExportWriteError(ContractExportError):
    """Bundle could not be written to the output path"""
    default_code = ErrorCodes.EXPORT_WRITE_FAILED

    def __init__(self, message: str, path: str = None):
        super().__init__(message, path=path)
