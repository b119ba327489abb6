from pydantic import SecretStr
import pytest

from src.service.automation.domain.entity.user_entity import UserEntity
from src.service.automation.driven_adapter.repo.user_repo_impl import UserRepoImpl
from src.service.automation.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


@pytest.mark.unit
class TestUserRepoImpl:
    @pytest.fixture
    def password_hasher(self):
        return BcryptPasswordHasher()

    @pytest.fixture
    def repo(self, password_hasher):
        return UserRepoImpl(password_hasher=password_hasher)

    @pytest.fixture
    def alice(self, password_hasher):
        return UserEntity(
            username='alice',
            email='alice@example.com',
            hashed_password=password_hasher.hash_password(plain_password=SecretStr('s3cret')),
        )

    @pytest.mark.asyncio
    async def test_create_assigns_ids(self, repo, alice):
        created = await repo.create(alice)

        assert created.id == 1
        assert await repo.exists_by_username('alice') is True
        assert await repo.exists_by_username('bob') is False

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, repo, alice):
        await repo.create(alice)

        with pytest.raises(ValueError, match='already exists'):
            await repo.create(UserEntity(username='alice'))

    @pytest.mark.asyncio
    async def test_verify_password(self, repo, alice):
        await repo.create(alice)

        assert await repo.verify_password('alice', 's3cret') is alice
        assert await repo.verify_password('alice', 'wrong') is None
        assert await repo.verify_password('nobody', 's3cret') is None


@pytest.mark.unit
class TestBcryptPasswordHasher:
    def test_hash_and_verify(self):
        hasher = BcryptPasswordHasher()

        hashed = hasher.hash_password(plain_password=SecretStr('admin123'))

        assert hashed.startswith('$2')
        assert hasher.verify_password(plain_password=SecretStr('admin123'), hashed_password=hashed)
        assert not hasher.verify_password(plain_password=SecretStr('nope'), hashed_password=hashed)

    def test_non_bcrypt_hash_does_not_verify(self):
        hasher = BcryptPasswordHasher()

        assert not hasher.verify_password(
            plain_password=SecretStr('admin123'), hashed_password='plaintext'
        )
