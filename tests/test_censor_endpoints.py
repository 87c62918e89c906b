from __future__ import annotations

import unittest
from unittest.mock import patch

from fastapi import HTTPException
from pydantic import ValidationError
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker


class CensorEndpointsTestCase(unittest.TestCase):
    def setUp(self) -> None:
        from sensitive.censor.routers import censor as censor_module
        from sensitive.censor.services import SensitiveService

        self._engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
        self._SessionLocal = sessionmaker(bind=self._engine, future=True)
        self.db: Session = self._SessionLocal()

        from sensitive.core.database import Base
        from sensitive.censor.models import SensitiveWord

        Base.metadata.create_all(bind=self._engine, tables=[SensitiveWord.__table__])

        self._patches = [patch.object(censor_module, "service", SensitiveService())]
        for p in self._patches:
            p.start()

    def tearDown(self) -> None:
        for p in reversed(getattr(self, "_patches", [])):
            p.stop()
        self.db.close()
        self._engine.dispose()

    def _add(self, *words: str) -> None:
        from sensitive.censor.routers.censor import add_words
        from sensitive.censor.schemas import WordsRequest

        add_words(WordsRequest(words=list(words)), db=self.db)

    def test_add_and_delete_words(self) -> None:
        from sensitive.censor.routers.censor import add_words, delete_words, validate_text
        from sensitive.censor.schemas import TextRequest, WordsRequest

        result = add_words(WordsRequest(words=["bad", "word"], updated_by="admin"), db=self.db)
        self.assertEqual(result.code, 200)
        self.assertEqual(result.data.affected, 2)

        result = delete_words(WordsRequest(words=["bad"]), db=self.db)
        self.assertEqual(result.data.affected, 1)

        result = validate_text(TextRequest(text="bad word"), db=self.db)
        self.assertFalse(result.data.valid)
        self.assertEqual(result.data.word, "word")

    def test_empty_word_list_is_rejected(self) -> None:
        from sensitive.censor.schemas import WordsRequest

        with self.assertRaises(ValidationError):
            WordsRequest(words=[])

    def test_validate_and_find_in_strip_noise(self) -> None:
        from sensitive.censor.routers.censor import find_in_text, validate_text
        from sensitive.censor.schemas import TextRequest

        self._add("bad")
        result = validate_text(TextRequest(text="b|a d"), db=self.db)
        self.assertFalse(result.data.valid)
        self.assertEqual(result.data.word, "bad")

        result = find_in_text(TextRequest(text="b|a d"), db=self.db)
        self.assertTrue(result.data.found)

        result = find_in_text(TextRequest(text="fine"), db=self.db)
        self.assertFalse(result.data.found)
        self.assertEqual(result.data.word, "")

    def test_find_all(self) -> None:
        from sensitive.censor.routers.censor import find_all_in_text
        from sensitive.censor.schemas import TextRequest

        self._add("bad", "word", "badword")
        result = find_all_in_text(TextRequest(text="badword"), db=self.db)
        self.assertEqual(result.data.words, ["bad", "badword", "word"])

    def test_filter_and_replace(self) -> None:
        from sensitive.censor.routers.censor import filter_text, replace_text
        from sensitive.censor.schemas import ReplaceRequest, TextRequest

        self._add("bad")
        self.assertEqual(filter_text(TextRequest(text="a badword b"), db=self.db).data.text, "a word b")
        self.assertEqual(filter_text(TextRequest(text="b|a d"), db=self.db).data.text, "b|a d")
        self.assertEqual(replace_text(ReplaceRequest(text="badword"), db=self.db).data.text, "***word")
        self.assertEqual(
            replace_text(ReplaceRequest(text="badword", mask_char="x"), db=self.db).data.text,
            "xxxword",
        )

    def test_mask_char_must_be_single_character(self) -> None:
        from sensitive.censor.schemas import ReplaceRequest

        with self.assertRaises(ValidationError):
            ReplaceRequest(text="bad", mask_char="**")

    def test_batch_endpoints(self) -> None:
        from sensitive.censor.routers.censor import find_all_in_texts, find_in_texts, validate_texts
        from sensitive.censor.schemas import TextsRequest

        self._add("bad", "word")
        result = validate_texts(TextsRequest(texts=["ok", "w o r d", "bad"]), db=self.db)
        self.assertFalse(result.data.valid)
        self.assertEqual(result.data.words, ["word"])

        result = find_in_texts(TextsRequest(texts=["ok", "nothing"]), db=self.db)
        self.assertFalse(result.data.found)

        result = find_all_in_texts(TextsRequest(texts=["bad", "b@ad"]), db=self.db)
        self.assertEqual(result.data.words, ["bad", "bad"])

    def test_reload(self) -> None:
        from sensitive.censor.routers.censor import reload_words

        self._add("bad", "word")
        self.assertEqual(reload_words(db=self.db).data.count, 2)

    def test_update_noise_pattern(self) -> None:
        from sensitive.censor.noise import DEFAULT_NOISE_PATTERN
        from sensitive.censor.routers.censor import find_in_text, update_noise_pattern
        from sensitive.censor.schemas import NoisePatternRequest, TextRequest

        self._add("bad")
        with self.assertRaises(HTTPException) as ctx:
            update_noise_pattern(NoisePatternRequest(pattern="(bad"))
        self.assertEqual(ctx.exception.status_code, 400)

        result = update_noise_pattern(NoisePatternRequest(pattern=DEFAULT_NOISE_PATTERN))
        self.assertEqual(result.data.pattern, DEFAULT_NOISE_PATTERN)

        result = update_noise_pattern(NoisePatternRequest(pattern="_"))
        self.assertEqual(result.data.pattern, "_")
        self.assertTrue(find_in_text(TextRequest(text="b_a_d"), db=self.db).data.found)


class SettingsTestCase(unittest.TestCase):
    def test_defaults(self) -> None:
        from sensitive.censor.noise import DEFAULT_NOISE_PATTERN
        from sensitive.core.config import Settings

        s = Settings(_env_file=None)
        self.assertEqual(s.NOISE_PATTERN, DEFAULT_NOISE_PATTERN)
        self.assertEqual(s.MASK_CHAR, "*")

    def test_invalid_noise_pattern_fails_fast(self) -> None:
        from sensitive.core.config import Settings

        with self.assertRaises(ValidationError):
            Settings(_env_file=None, NOISE_PATTERN="[")

    def test_invalid_mask_char_fails_fast(self) -> None:
        from sensitive.core.config import Settings

        with self.assertRaises(ValidationError):
            Settings(_env_file=None, MASK_CHAR="")


if __name__ == "__main__":
    unittest.main()
