from rest_framework import status
from rest_framework.exceptions import APIException

class RegistrationUnavailable(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Registration is temporarily unavailable, please retry."
    default_code = "unavailable"

    def __init__(self, detail=None, code=None, retry_after=None):
        super().__init__(detail, code)
        self.wait = retry_after

class RegistrationFailed(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Failed to process registration."
    default_code = "registration_failed"
