from typing import List

from ..context import ApiContext
from ..schemas import Note, NoteCreatePayload, NoteUpdatePayload
from ..transport import ApiResponse, decode_data, decode_data_list, expect_status, send
from . import paths


def create_note_response(ctx: ApiContext, payload: NoteCreatePayload) -> ApiResponse:
    return send(ctx.session, ctx.auth_template, "POST", paths.NOTES, json=payload.model_dump())


def create_note(ctx: ApiContext, payload: NoteCreatePayload) -> Note:
    return decode_data(expect_status(create_note_response(ctx, payload), 200), Note)


def get_note_response(ctx: ApiContext, note_id: str) -> ApiResponse:
    return send(ctx.session, ctx.auth_template, "GET", paths.note_by_id(note_id))


def get_note(ctx: ApiContext, note_id: str) -> Note:
    return decode_data(expect_status(get_note_response(ctx, note_id), 200), Note)


def update_note_response(ctx: ApiContext, note_id: str, payload: NoteUpdatePayload) -> ApiResponse:
    return send(ctx.session, ctx.auth_template, "PUT", paths.note_by_id(note_id), json=payload.model_dump())


def update_note(ctx: ApiContext, note_id: str, payload: NoteUpdatePayload) -> Note:
    return decode_data(expect_status(update_note_response(ctx, note_id, payload), 200), Note)


def delete_note_response(ctx: ApiContext, note_id: str) -> ApiResponse:
    return send(ctx.session, ctx.auth_template, "DELETE", paths.note_by_id(note_id))


def delete_note(ctx: ApiContext, note_id: str) -> None:
    expect_status(delete_note_response(ctx, note_id), 200)


def list_notes_response(ctx: ApiContext) -> ApiResponse:
    return send(ctx.session, ctx.auth_template, "GET", paths.NOTES)


def list_notes(ctx: ApiContext) -> List[Note]:
    return decode_data_list(expect_status(list_notes_response(ctx), 200), Note)
