import uuid

from .schemas import Credentials, NoteCreatePayload, NoteUpdatePayload

TEST_PASSWORD = "TestPass123!"


def random_user() -> Credentials:
    suffix = uuid.uuid4().hex
    return Credentials(
        name=f"Test User {suffix[:8]}",
        email=f"notes-test-{suffix}@example.com",
        password=TEST_PASSWORD,
    )


def simple_note() -> NoteCreatePayload:
    return NoteCreatePayload(
        title="Test Note Title",
        description="This is a test note description",
        category="Home",
    )


def note_with_empty_title() -> NoteCreatePayload:
    return NoteCreatePayload(title="", description="Note with empty title", category="Work")


def note_with_empty_description() -> NoteCreatePayload:
    return NoteCreatePayload(title="Note without description", description="", category="Personal")


def update_note_data() -> NoteUpdatePayload:
    return NoteUpdatePayload(
        title="Updated Note Title",
        description="Updated description content",
        category="Work",
        completed=True,
    )
