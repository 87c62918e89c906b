from __future__ import annotations

import datetime as dt
from typing import Sequence

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from sensitive.censor.enums import WordSource
from sensitive.censor.models import SensitiveWord


class WordRepository:
    def upsert_many(
        self,
        db: Session,
        words: Sequence[str],
        *,
        source: WordSource = WordSource.manual,
        updated_by: str | None = None,
    ) -> int:
        now = dt.datetime.now(dt.timezone.utc)
        affected = 0
        for word in dict.fromkeys(w for w in words if w):
            existing = db.execute(select(SensitiveWord).where(SensitiveWord.word == word)).scalar_one_or_none()
            if existing is None:
                db.add(
                    SensitiveWord(
                        word=word,
                        enabled=True,
                        source=source.value,
                        updated_by=updated_by,
                        created_at=now,
                        updated_at=now,
                    )
                )
            else:
                existing.enabled = True
                existing.source = source.value
                existing.updated_by = updated_by
                existing.updated_at = now
            affected += 1
        db.commit()
        return affected

    def disable_many(self, db: Session, words: Sequence[str], updated_by: str | None = None) -> int:
        words = [w for w in words if w]
        if not words:
            return 0
        now = dt.datetime.now(dt.timezone.utc)
        result = db.execute(
            update(SensitiveWord)
            .where(SensitiveWord.word.in_(words), SensitiveWord.enabled == True)  # noqa: E712
            .values(enabled=False, updated_by=updated_by, updated_at=now)
        )
        db.commit()
        return int(result.rowcount or 0)

    def list_active(self, db: Session) -> list[SensitiveWord]:
        stmt = select(SensitiveWord).where(SensitiveWord.enabled == True).order_by(SensitiveWord.id)  # noqa: E712
        return list(db.execute(stmt).scalars().all())
