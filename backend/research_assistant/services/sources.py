# backend/research_assistant/services/sources.py
from sqlalchemy import delete, update
from sqlalchemy.orm import Session

from ..errors import ActionError, not_found
from ..models import Source, SourceType
from ..schemas.source import Source as SourceSchema, SourceSave
from ..utils.logging import service_logger
from ..utils.timestamps import utcnow
from .auth import ActionContext, CurrentUser, require_user
from .policy import get_owned_project, is_project_owned, owned_project_ids


def _source_values(data: SourceSave) -> dict:
    """Every mutable column; a save with an id replaces all of them"""
    return {
        "project_id": data.project_id,
        "type": data.type or SourceType.WEB,
        "title": data.title,
        "url": data.url,
        "citation_text": data.citation_text,
        "citation_meta": data.citation_meta,
        "snippet": data.snippet,
        "meta": data.metadata,
    }


def _missing(db: Session, user: CurrentUser, project_id: int) -> ActionError:
    if not is_project_owned(db, user, project_id):
        return not_found("Project")
    return not_found("Source")


class SourceService:
    """Sources attached to a project: URLs, PDFs, books, videos"""

    @staticmethod
    def save_source(db: Session, context: ActionContext, data: SourceSave) -> SourceSchema:
        user = require_user(context)
        service_logger.info("Saving source", extra={
            "source_id": data.id,
            "project_id": data.project_id
        })

        values = _source_values(data)
        try:
            if data.id is not None:
                stmt = (
                    update(Source)
                    .where(
                        Source.id == data.id,
                        Source.project_id == data.project_id,
                        Source.project_id.in_(owned_project_ids(user))
                    )
                    .values(**values)
                    .returning(Source)
                    .execution_options(synchronize_session="fetch", populate_existing=True)
                )
                source = db.execute(stmt).scalar_one_or_none()
                if source is None:
                    raise _missing(db, user, data.project_id)
            else:
                get_owned_project(db, user, data.project_id, lock=True)
                source = Source(**values, created_at=utcnow())
                db.add(source)
                db.flush()
                # Respond with what the store kept, not the in-memory values
                db.refresh(source)
            result = SourceSchema.model_validate(source)
            db.commit()
        except ActionError as e:
            service_logger.warning(e.message, extra={
                "source_id": data.id,
                "project_id": data.project_id
            })
            db.rollback()
            raise
        except Exception as e:
            service_logger.error("Failed to save source", extra={
                "source_id": data.id,
                "project_id": data.project_id,
                "error": str(e)
            })
            db.rollback()
            raise

        service_logger.info("Source saved", extra={"source_id": result.id, "project_id": result.project_id})
        return result

    @staticmethod
    def delete_source(db: Session, context: ActionContext, source_id: int, project_id: int) -> SourceSchema:
        user = require_user(context)
        service_logger.info("Deleting source", extra={"source_id": source_id, "project_id": project_id})

        try:
            stmt = (
                delete(Source)
                .where(
                    Source.id == source_id,
                    Source.project_id == project_id,
                    Source.project_id.in_(owned_project_ids(user))
                )
                .returning(Source)
                .execution_options(synchronize_session="fetch")
            )
            source = db.execute(stmt).scalar_one_or_none()
            if source is None:
                raise _missing(db, user, project_id)
            result = SourceSchema.model_validate(source)
            db.commit()
        except ActionError as e:
            service_logger.warning(e.message, extra={"source_id": source_id, "project_id": project_id})
            db.rollback()
            raise
        except Exception as e:
            service_logger.error("Failed to delete source", extra={
                "source_id": source_id,
                "error": str(e)
            })
            db.rollback()
            raise

        return result


source_service = SourceService()
