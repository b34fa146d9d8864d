"""비밀번호 해시 유틸리티

사용자 비밀번호는 평문으로 저장하지 않고, bcrypt 솔트(``salt``)와
해당 솔트로 계산한 bcrypt 해시(``hashed_password``)만 저장합니다.
"""

import bcrypt

from app.core.config import settings

# bcrypt는 72바이트까지만 입력으로 사용
BCRYPT_MAX_BYTES = 72


def make_salt(rounds: int | None = None) -> str:
    """새 bcrypt 솔트 생성 (비용 인자 포함, 예: ``$2b$12$...``)"""
    return bcrypt.gensalt(rounds=rounds or settings.password_hash_rounds).decode(
        "ascii"
    )


def encrypt_password(password: str, salt: str) -> str:
    """솔트를 적용한 비밀번호 해시 생성

    Args:
        password: 평문 비밀번호
        salt: ``make_salt()``로 발급한 bcrypt 솔트

    Returns:
        str: bcrypt 해시 문자열 (빈 비밀번호는 빈 문자열)
    """
    if not password:
        return ""
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt.encode("ascii"))
    return hashed.decode("ascii")


def verify_password(password: str, hashed_password: str) -> bool:
    """비밀번호 검증"""
    if not password or not hashed_password:
        return False
    return bcrypt.checkpw(
        password.encode("utf-8"), hashed_password.encode("ascii")
    )
