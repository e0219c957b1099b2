USERS_REGISTER = "/users/register"
USERS_LOGIN = "/users/login"
USERS_DELETE = "/users/delete-account"

NOTES = "/notes"
NOTES_BY_ID = "/notes/{id}"


def note_by_id(note_id: str) -> str:
    # ids are substituted literally, no percent-encoding
    return NOTES_BY_ID.replace("{id}", str(note_id))
