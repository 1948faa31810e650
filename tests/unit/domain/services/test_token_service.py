import jwt
import pytest

from src.core.exceptions import AuthenticationError
from src.domain.entities.user import Role, User
from src.domain.services.auth.token import TokenService

SECRET = "unit-test-secret-key-0123456789abcdef"


@pytest.fixture
def user():
    return User(
        id="7d1c1f7e-1111-4a4a-9c9c-000000000001",
        first_name="Lola",
        last_name="Ade",
        email="lola@example.com",
        phone=None,
        hashed_password="x",
        user_id="LA12345678",
        role=Role.LANDLORD,
    )


class TestTokenService:
    def test_access_token_carries_subject_and_role(self, user):
        service = TokenService(SECRET, expire_minutes=5)

        token = service.create_access_token(user)

        claims = jwt.decode(token, SECRET, algorithms=["HS256"])
        assert claims["sub"] == user.id
        assert claims["role"] == "landlord"
        assert claims["exp"] - claims["iat"] == 300

    def test_decode_round_trip(self, user):
        service = TokenService(SECRET)

        claims = service.decode_access_token(service.create_access_token(user))

        assert claims["sub"] == user.id

    def test_decode_rejects_foreign_signature(self, user):
        token = TokenService("another-secret-key-0123456789abcdef").create_access_token(user)

        with pytest.raises(AuthenticationError) as exc_info:
            TokenService(SECRET).decode_access_token(token)

        assert exc_info.value.code == "invalid_token"

    def test_decode_rejects_expired_token(self, user):
        token = TokenService(SECRET, expire_minutes=-1).create_access_token(user)

        with pytest.raises(AuthenticationError):
            TokenService(SECRET).decode_access_token(token)
