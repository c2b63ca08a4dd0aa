"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Applicant data or loan terms fail validation"""

    pass


class InvalidTermError(InvalidInputError):
    """Loan term is not a positive number of months"""

    pass


class InvalidScoreError(InvalidInputError):
    """Credit score is outside the 0-1000 range"""

    pass


class InvalidAmountError(InvalidInputError):
    """Requested amount is negative or not a finite number"""

    pass


class InvalidIncomeError(InvalidInputError):
    """Monthly income is negative or not a finite number"""

    pass


class InvalidActiveLoansError(InvalidInputError):
    """Active loan count is negative"""

    pass


class InvalidRateError(InvalidInputError):
    """Annual nominal rate is negative or not a finite number"""

    pass
