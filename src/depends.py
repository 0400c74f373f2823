from datetime import timedelta

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.jwt_token_issuer import JwtTokenIssuer
from src.adapter.services.smtp_notifier import SmtpNotifier
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.notifier import Notifier
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_issuer import TokenIssuer

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

password_hasher = BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)

token_issuer = JwtTokenIssuer(
    secret=ApplicationConfig.JWT_SECRET,
    expires_in=timedelta(days=ApplicationConfig.JWT_EXPIRES_DAYS),
)

notifier = SmtpNotifier(
    host=ApplicationConfig.SMTP_HOST,
    port=ApplicationConfig.SMTP_PORT,
    username=ApplicationConfig.SMTP_USER,
    password=ApplicationConfig.SMTP_PASSWORD,
    sender=ApplicationConfig.MAIL_FROM,
    use_tls=ApplicationConfig.SMTP_USE_TLS,
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_password_hasher() -> PasswordHasher:
    return password_hasher


def get_token_issuer() -> TokenIssuer:
    return token_issuer


def get_notifier() -> Notifier:
    return notifier


def get_reset_url_base() -> str:
    return ApplicationConfig.RESET_PASSWORD_URL


def get_reset_token_ttl() -> timedelta:
    return timedelta(minutes=ApplicationConfig.RESET_TOKEN_TTL_MINUTES)
