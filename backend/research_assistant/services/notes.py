# backend/research_assistant/services/notes.py
from typing import Optional

from sqlalchemy import delete, exists, select, update
from sqlalchemy.orm import Session

from ..errors import ActionError, not_found
from ..models import Note, NoteType, Source
from ..schemas.note import Note as NoteSchema, NoteSave
from ..utils.logging import service_logger
from ..utils.timestamps import utcnow
from .auth import ActionContext, CurrentUser, require_user
from .policy import get_owned_project, is_project_owned, owned_project_ids


def _source_in_project(source_id: int, project_id: int):
    return exists().where(Source.id == source_id, Source.project_id == project_id)


def _note_values(data: NoteSave) -> dict:
    return {
        "project_id": data.project_id,
        "source_id": data.source_id,
        "type": data.type or NoteType.SUMMARY,
        "content": data.content,
        "heading": data.heading,
        "tags": data.tags,
        "location": data.location,
        "ai_meta": data.ai_meta,
    }


def _missing(db: Session, user: CurrentUser, project_id: int, source_id: Optional[int]) -> ActionError:
    if not is_project_owned(db, user, project_id):
        return not_found("Project")
    if source_id is not None and not db.execute(select(_source_in_project(source_id, project_id))).scalar():
        return not_found("Source")
    return not_found("Note")


class NoteService:
    """Summaries, quotes, ideas and questions written inside a project"""

    @staticmethod
    def save_note(db: Session, context: ActionContext, data: NoteSave) -> NoteSchema:
        user = require_user(context)
        service_logger.info("Saving note", extra={
            "note_id": data.id,
            "project_id": data.project_id,
            "source_id": data.source_id
        })

        values = _note_values(data)
        try:
            if data.id is not None:
                conditions = [
                    Note.id == data.id,
                    Note.project_id == data.project_id,
                    Note.project_id.in_(owned_project_ids(user)),
                ]
                if data.source_id is not None:
                    conditions.append(_source_in_project(data.source_id, data.project_id))
                stmt = (
                    update(Note)
                    .where(*conditions)
                    .values(**values, updated_at=utcnow())
                    .returning(Note)
                    .execution_options(synchronize_session="fetch", populate_existing=True)
                )
                note = db.execute(stmt).scalar_one_or_none()
                if note is None:
                    raise _missing(db, user, data.project_id, data.source_id)
            else:
                get_owned_project(db, user, data.project_id, lock=True)
                if data.source_id is not None:
                    source_ok = db.execute(
                        select(_source_in_project(data.source_id, data.project_id))
                    ).scalar()
                    if not source_ok:
                        raise not_found("Source")
                now = utcnow()
                note = Note(**values, created_at=now, updated_at=now)
                db.add(note)
                db.flush()
                db.refresh(note)
            result = NoteSchema.model_validate(note)
            db.commit()
        except ActionError as e:
            service_logger.warning(e.message, extra={
                "note_id": data.id,
                "project_id": data.project_id,
                "source_id": data.source_id
            })
            db.rollback()
            raise
        except Exception as e:
            service_logger.error("Failed to save note", extra={
                "note_id": data.id,
                "project_id": data.project_id,
                "error": str(e)
            })
            db.rollback()
            raise

        service_logger.info("Note saved", extra={"note_id": result.id, "project_id": result.project_id})
        return result

    @staticmethod
    def delete_note(db: Session, context: ActionContext, note_id: int, project_id: int) -> NoteSchema:
        user = require_user(context)
        service_logger.info("Deleting note", extra={"note_id": note_id, "project_id": project_id})

        try:
            stmt = (
                delete(Note)
                .where(
                    Note.id == note_id,
                    Note.project_id == project_id,
                    Note.project_id.in_(owned_project_ids(user))
                )
                .returning(Note)
                .execution_options(synchronize_session="fetch")
            )
            note = db.execute(stmt).scalar_one_or_none()
            if note is None:
                raise _missing(db, user, project_id, None)
            result = NoteSchema.model_validate(note)
            db.commit()
        except ActionError as e:
            service_logger.warning(e.message, extra={"note_id": note_id, "project_id": project_id})
            db.rollback()
            raise
        except Exception as e:
            service_logger.error("Failed to delete note", extra={
                "note_id": note_id,
                "error": str(e)
            })
            db.rollback()
            raise

        return result


note_service = NoteService()
