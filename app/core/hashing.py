from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# bcrypt ignores everything past this many bytes
BCRYPT_MAX_BYTES = 72


class Hasher:
    @staticmethod
    def _truncate_password(password: str) -> str:
        """
        Cut the password down to what bcrypt will actually read,
        without splitting a multi-byte UTF-8 character.
        """
        encoded = password.encode('utf-8')
        if len(encoded) <= BCRYPT_MAX_BYTES:
            return password

        truncated = encoded[:BCRYPT_MAX_BYTES]
        return truncated.decode('utf-8', errors='ignore')

    @staticmethod
    def hash_password(password: str) -> str:
        return pwd_context.hash(Hasher._truncate_password(password))

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        return pwd_context.verify(Hasher._truncate_password(plain_password), hashed_password)
