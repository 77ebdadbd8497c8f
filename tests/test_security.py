"""
Тесты хеширования паролей и JWT токенов
"""
from datetime import timedelta
import uuid

from jose import jwt

from knowbase.core.config import settings
from knowbase.core.security import (
    create_access_token,
    get_password_hash,
    user_id_from_token,
    verify_password,
    verify_token,
)


class TestPasswordHashing:
    """Хеширование паролей"""

    def test_hash_is_not_plain_password(self):
        hashed = get_password_hash("secret1")
        assert hashed != "secret1"
        assert verify_password("secret1", hashed)

    def test_wrong_password_rejected(self):
        hashed = get_password_hash("secret1")
        assert not verify_password("secret2", hashed)

    def test_empty_values_rejected(self):
        hashed = get_password_hash("secret1")
        assert not verify_password("", hashed)
        assert not verify_password("secret1", "")

    def test_same_password_hashes_differ(self):
        """Соль делает хеши разными"""
        assert get_password_hash("secret1") != get_password_hash("secret1")


class TestTokens:
    """Выпуск и проверка токенов"""

    def test_token_roundtrip(self):
        user_id = uuid.uuid4()
        token = create_access_token({"sub": str(user_id)})

        payload = verify_token(token)
        assert payload["sub"] == str(user_id)
        assert "exp" in payload
        assert user_id_from_token(token) == user_id

    def test_expired_token(self):
        token = create_access_token({"sub": str(uuid.uuid4())}, expires_delta=timedelta(minutes=-1))
        assert verify_token(token) is None
        assert user_id_from_token(token) is None

    def test_foreign_signature(self):
        token = jwt.encode({"sub": str(uuid.uuid4())}, "other-secret", algorithm=settings.jwt_algorithm)
        assert user_id_from_token(token) is None

    def test_garbage_and_missing_token(self):
        assert user_id_from_token("not-a-token") is None
        assert user_id_from_token("") is None
        assert user_id_from_token(None) is None

    def test_subject_must_be_uuid(self):
        token = create_access_token({"sub": "42"})
        assert verify_token(token) is not None
        assert user_id_from_token(token) is None
