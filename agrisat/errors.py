# agrisat/errors.py


class DivisionDataError(Exception):
    """Base for every failure the division pipeline can raise.

    ``code`` is the machine classification returned to callers and
    ``category`` says whose fault it is ("client" or "server").
    """

    code = "DivisionDataError"
    category = "server"

    @property
    def status_code(self) -> int:
        return 400 if self.category == "client" else 500


class UnknownDivisionError(DivisionDataError):
    code = "UnknownDivision"
    category = "client"


class DataFileNotFoundError(DivisionDataError):
    code = "FileNotFound"


class DataParseError(DivisionDataError):
    code = "ParseError"


class InsufficientDataError(DivisionDataError):
    code = "InsufficientData"
