class CRMException(Exception):
    """Base exception for the territory CRM"""

    pass


class UnauthorizedException(CRMException):
    """Raised when JWT validation fails"""

    pass


class NotFoundException(CRMException):
    """Raised when resource not found"""

    pass


class ForbiddenException(CRMException):
    """Raised when a caller has no company or lacks admin rights"""

    pass


class ValidationException(CRMException):
    """Raised for business logic validation errors"""

    pass


class PrincipalNotFoundException(CRMException):
    """Raised by the identity provider when a user id or email is unknown"""

    pass


class AIServiceException(CRMException):
    """Raised when the LLM provider call or its response parsing fails"""

    pass
