from httpx import AsyncClient, Response
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from credflow.domain.entities import User


async def signup(
    client: AsyncClient,
    username: str = "alice1",
    email: str = "a@example.com",
    password: str = "Secret1",
    password_confirm: str = None,
) -> Response:
    return await client.post(
        "/signup",
        data={
            "username": username,
            "email": email,
            "password": password,
            "password_confirm": password if password_confirm is None else password_confirm,
        },
    )


async def signin(client: AsyncClient, username: str, password: str) -> Response:
    return await client.post("/signin", data={"username": username, "password": password})


async def load_user(db_session: AsyncSession, username: str) -> User:
    stmt = select(User).where(User.username == username).execution_options(populate_existing=True)
    result = await db_session.exec(stmt)
    return result.one()
