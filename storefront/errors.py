# storefront/errors.py
"""
Errors raised by the storefront core.

Each error carries a stable human-readable message (kept identical to the
texts clients of the original API already match on), a machine-readable
``kind`` and the HTTP status the API layer renders it with.
"""


class ShopError(Exception):
    kind = 'error'
    status_code = 400
    default_message = 'Request could not be processed.'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {'message': self.message, 'error': self.kind}


class DuplicateEmail(ShopError):
    kind = 'duplicate_email'
    status_code = 409
    default_message = 'A user with the same email address is already registered.'


class AuthFailure(ShopError):
    kind = 'auth_failure'
    status_code = 401
    default_message = 'Login failed. Incorrect email or password.'


class Unauthorized(ShopError):
    kind = 'unauthorized'
    status_code = 403
    default_message = 'Unauthorized. Access denied.'


class NotFound(ShopError):
    kind = 'not_found'
    status_code = 404
    default_message = 'Not found.'


class InvalidQuantity(ShopError):
    kind = 'invalid_quantity'
    status_code = 400
    default_message = 'Quantity must be a number.'
