"""비밀번호 해시 유틸리티 테스트"""

import bcrypt

from app.domains.users.models import User
from app.domains.users.security import (
    encrypt_password,
    make_salt,
    verify_password,
)


def test_make_salt_is_bcrypt_salt():
    salt1 = make_salt()
    salt2 = make_salt()

    assert salt1 != salt2
    assert salt1.startswith("$2")
    assert len(salt1) == 29


def test_make_salt_uses_requested_rounds():
    assert make_salt(rounds=5).split("$")[2] == "05"


def test_encrypt_password_embeds_salt():
    salt = make_salt()
    hashed = encrypt_password("secret1", salt)

    assert hashed.startswith(salt)
    assert hashed == encrypt_password("secret1", salt)
    assert hashed != encrypt_password("secret1", make_salt())


def test_encrypt_password_is_bcrypt_compatible():
    hashed = encrypt_password("secret1", make_salt())

    assert bcrypt.checkpw(b"secret1", hashed.encode())


def test_encrypt_empty_password():
    assert encrypt_password("", make_salt()) == ""


def test_verify_password():
    hashed = encrypt_password("secret1", make_salt())

    assert verify_password("secret1", hashed)
    assert not verify_password("wrong", hashed)
    assert not verify_password("", hashed)
    assert not verify_password("secret1", "")


def test_user_set_password_and_authenticate():
    user = User(name="A", email="a@x.com")
    user.set_password("secret1")

    assert user.salt.startswith("$2")
    assert user.hashed_password.startswith(user.salt)
    assert user.hashed_password != "secret1"
    assert user.authenticate("secret1")
    assert not user.authenticate("secret2")
