import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.errors import DirectoryLookupFailed, InvalidCredentials, ShopNotFound
from app.core.security import (
    BcryptPasswordVerifier,
    PlaintextPasswordVerifier,
    get_password_verifier,
    hash_password,
)
from app.models.master.master import Shop
from app.services.directory_service import MasterDirectoryClient
from conftest import REAL_SHOP, params_for

WHITELIST = {
    "apiKey", "authDomain", "projectId", "appId",
    "messagingSenderId", "measurementId", "shopName",
}


@pytest.fixture
def directory(shops):
    return MasterDirectoryClient(shops)


def test_unknown_shop(directory):
    with pytest.raises(ShopNotFound):
        directory.authenticate("ghost-shop", "x")


def test_wrong_password(directory):
    with pytest.raises(InvalidCredentials):
        directory.authenticate("real-shop", "wrong-pw")


def test_password_is_case_sensitive(directory):
    with pytest.raises(InvalidCredentials):
        directory.authenticate("real-shop", "CORRECT-PW")


def test_successful_lookup_copies_whitelisted_fields(directory):
    params = directory.authenticate("real-shop", "correct-pw")

    assert params == params_for(REAL_SHOP)
    record = params.to_record()
    assert set(record) == WHITELIST
    assert "correct-pw" not in record.values()
    assert not hasattr(params, "password")


def test_unreachable_directory(tmp_path):
    # no shops table behind this engine
    engine = create_engine(f"sqlite:///{tmp_path / 'empty.db'}")
    directory = MasterDirectoryClient(sessionmaker(bind=engine))

    with pytest.raises(DirectoryLookupFailed) as exc:
        directory.authenticate("real-shop", "correct-pw")

    assert exc.value.detail == "Login failed"
    engine.dispose()


def test_record_without_project_id_is_a_lookup_failure(master_sessionmaker):
    with master_sessionmaker() as db:
        db.add(Shop(**{**REAL_SHOP, "project_id": ""}))
        db.commit()

    directory = MasterDirectoryClient(master_sessionmaker)

    with pytest.raises(DirectoryLookupFailed):
        directory.authenticate("real-shop", "correct-pw")


def test_bcrypt_verifier_swaps_in_without_touching_callers(master_sessionmaker):
    with master_sessionmaker() as db:
        db.add(Shop(**{**REAL_SHOP, "password": hash_password("correct-pw")}))
        db.commit()

    directory = MasterDirectoryClient(master_sessionmaker, verifier=BcryptPasswordVerifier())

    assert directory.authenticate("real-shop", "correct-pw").project_id == "real_project"
    with pytest.raises(InvalidCredentials):
        directory.authenticate("real-shop", "wrong-pw")


def test_bcrypt_verifier_rejects_plaintext_secret():
    assert BcryptPasswordVerifier().verify("correct-pw", "correct-pw") is False


def test_verifier_selection():
    assert isinstance(get_password_verifier("plaintext"), PlaintextPasswordVerifier)
    assert isinstance(get_password_verifier("BCRYPT"), BcryptPasswordVerifier)
    with pytest.raises(ValueError):
        get_password_verifier("md5")
