import pytest

from bookshelf_api.app.core.config import Settings
from bookshelf_api.app.core.messages import MESSAGES, get_message


def test_default_settings():
    config = Settings()
    assert config.project_name
    assert isinstance(config.port, int)
    assert config.book_id_length > 0


def test_cors_origin_list_splits_and_strips():
    config = Settings(cors_origins=" http://a.test, ,http://b.test ")
    assert config.cors_origin_list == ["http://a.test", "http://b.test"]


def test_indonesian_messages_are_default():
    assert get_message("create", "MissingName") == "Gagal menambahkan buku. Mohon isi nama buku"
    assert get_message("delete", "NotFound") == "Buku gagal dihapus. Id tidak ditemukan"


def test_english_messages():
    assert get_message("get", "NotFound", "en") == "Book not found"


def test_unknown_locale_falls_back_to_default():
    assert get_message("update", "success", "xx") == "Buku berhasil diperbarui"


def test_catalogues_cover_the_same_keys():
    assert set(MESSAGES["id"]) == set(MESSAGES["en"])


def test_unknown_message_key_raises():
    with pytest.raises(KeyError):
        get_message("get", "success")
