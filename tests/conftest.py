"""Shared fixtures.

Every test gets its own SQLite database file and avatars directory; the app
is driven in-process through httpx, with ``get_db`` and the avatar storage
overridden to point at them.
"""

import io

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from PIL import Image
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import school.models  # noqa: F401
from school.core.database import Base, get_db
from school.dependencies import get_avatar_storage, get_name_printer
from school.main import app
from school.services.name_printer import NamePrinter
from school.services.storage_service import LocalStorageService


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'school.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def avatars_dir(tmp_path):
    """Not created up front: the upload path has to create it."""
    return tmp_path / "avatars"


@pytest.fixture
def printer_sink():
    return io.StringIO()


@pytest_asyncio.fixture
async def client(session_factory, avatars_dir, printer_sink):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_avatar_storage] = lambda: LocalStorageService(str(avatars_dir))
    app.dependency_overrides[get_name_printer] = lambda: NamePrinter(sink=printer_sink)

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def make_faculty(client):
    async def _make(name="Gryffindor", color="#FF0000"):
        resp = await client.post("/faculty", json={"name": name, "color": color})
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make


@pytest.fixture
def make_student(client):
    async def _make(name="Harry Potter", age=17, faculty_id=None):
        payload = {"name": name, "age": age}
        if faculty_id is not None:
            payload["facultyId"] = faculty_id
        resp = await client.post("/student", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make


def image_bytes(width: int, height: int, fmt: str = "PNG", mode: str = "RGB") -> bytes:
    """Encode a solid-colour test image."""
    buffer = io.BytesIO()
    Image.new(mode, (width, height), "red").save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def png_200x100():
    return image_bytes(200, 100)


@pytest.fixture
def make_image():
    return image_bytes
