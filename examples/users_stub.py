"""
A stub shaped like generated RPC client code, dispatching through grpt.execute.
Run against any HTTP backend serving the annotated routes:
    GRPT_BASE_URL=http://localhost:8000 python examples/users_stub.py
"""
import asyncio
import os

from grpt import MethodInfo, RpcOptions, execute, set_default_adapter
from grpt.core import Settings, create_http_client
from grpt.transcoding import TranscodingAdapter

GET_USER = MethodInfo(
    name="GetUser",
    service_name="demo.v1.Users",
    options={"google.api.http": {"get": "/v1/users/{user_id}"}},
)
CREATE_USER = MethodInfo(
    name="CreateUser",
    service_name="demo.v1.Users",
    options={"google.api.http": {"post": "/v1/users", "body": "*"}},
)


class UsersClient:
    """What the stub generator emits, with its dispatcher swapped for execute()."""

    def __init__(self, transport=None):
        self._transport = transport

    def get_user(self, input, options):
        return execute("unary", self._transport, GET_USER, options, input)

    def create_user(self, input, options):
        return execute("unary", self._transport, CREATE_USER, options, input)


async def main() -> None:
    settings = Settings.from_env()
    async with create_http_client(settings) as http:
        set_default_adapter(TranscodingAdapter(http))
        client = UsersClient()
        options = RpcOptions(base_url=settings.base_url, meta={"x-request-id": os.urandom(4).hex()})
        created = await client.create_user({"name": "Ada"}, options)
        print(created.status_code, created.text)
        fetched = await client.get_user({"userId": "1"}, options)
        print(fetched.status_code, fetched.text)


if __name__ == "__main__":
    asyncio.run(main())
