import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.notifier import INotifier
from src.depends import get_notifier, get_unit_of_work


class TestConfig(ApplicationConfig):
    DB_URI = "sqlite+aiosqlite:///./test.db"
    JWT_SECRET = "integration-test-secret"
    BCRYPT_ROUNDS = 4
    FRONTEND_URL = "https://app.example.com"
    EMAIL_USER = "no-reply@example.com"


class RecordingNotifier(INotifier):
    """Collects outgoing mail instead of sending it"""

    def __init__(self):
        self.sent = []
        self.fail = False

    async def send(self, subject, html_body, to_address, from_address):
        if self.fail:
            return False
        self.sent.append(
            {
                "subject": subject,
                "html_body": html_body,
                "to": to_address,
                "from": from_address,
            }
        )
        return True

    def last_reset_secret(self) -> str:
        html_body = self.sent[-1]["html_body"]
        return html_body.split("/reset-password/")[1].split('"')[0]


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(TestConfig.DB_URI)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def notifier():
    return RecordingNotifier()


@pytest_asyncio.fixture
async def app(db_session, notifier):
    from src.api.app import create_app

    app = create_app(TestConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_notifier] = lambda: notifier
    yield app
    await app.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
