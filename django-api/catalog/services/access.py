"""Identity checks guarding organiser-only resources."""

from catalog.domain import OrganiserClaim, User, UserId
from catalog.domain.errors import AccessDeniedError, InvalidInputError
from catalog.services.storage import store_errors
from catalog.stores.interfaces import UserStore

NOT_AN_ORGANISER = "Only organisers can access this resource."
INVALID_CREDENTIALS = "Invalid credentials."
NOT_AUTHORIZED = "You are not authorized to access this resource."


def parse_user_id(value: str | int | None, field: str = "organiserId") -> UserId:
    """Parse a user ID from request input.

    Raises:
        InvalidInputError: If the value is missing, zero or not an integer.
    """
    if value is None or value == "" or value == 0:
        raise InvalidInputError(f"{field} is required")
    try:
        return UserId.from_string(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{field} is invalid") from exc


def authorize_organiser_view(
    users: UserStore,
    claim: OrganiserClaim,
    requested_organiser_id: str | int | None,
) -> User:
    """Return the caller if the claim grants access to the organiser's resources.

    Checks run in order and stop at the first failure.

    Raises:
        InvalidInputError: If the requested organiser id is missing or malformed.
        AccessDeniedError: If the claim is not an organiser's, the email does not
            resolve to a user, or that user is not the requested organiser.
    """
    organiser_id = parse_user_id(requested_organiser_id)
    if not claim.is_organiser:
        raise AccessDeniedError(NOT_AN_ORGANISER)

    with store_errors():
        caller = users.get_user_by_email(claim.email)
    if caller is None:
        raise AccessDeniedError(INVALID_CREDENTIALS)
    if caller.id != organiser_id:
        raise AccessDeniedError(NOT_AUTHORIZED)
    return caller
