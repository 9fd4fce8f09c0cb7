import contextlib

import anyio
from anyio import create_task_group

from coreason_authlete import AuthleteApiAsync, AuthleteApiError, AuthleteConfig
from coreason_authlete.dto import (
    CredentialIssuerJwksRequest,
    CredentialIssuerMetadataRequest,
    CredentialJwtIssuerMetadataRequest,
)


async def main() -> None:
    """
    Fetches the documents a credential issuer publishes, concurrently.
    Includes:
    - TaskGroup for concurrency
    - OpenTelemetry instrumentation (auto-applied by the client)

    Reads AUTHLETE_BASE_URL, AUTHLETE_SERVICE_APIKEY and AUTHLETE_SERVICE_ACCESSTOKEN.
    """
    print(">>> Starting Credential Issuer Example")

    config = AuthleteConfig()
    documents: dict[str, str | None] = {}

    async with AuthleteApiAsync(config) as api:

        async def fetch_metadata() -> None:
            response = await api.credential_issuer_metadata(CredentialIssuerMetadataRequest(pretty=True))
            print(f"    - metadata: {response.summarize()}")
            documents["openid-credential-issuer"] = response.response_content

        async def fetch_jwt_issuer() -> None:
            response = await api.credential_jwt_issuer_metadata(CredentialJwtIssuerMetadataRequest(pretty=True))
            documents["jwt-vc-issuer"] = response.response_content

        async def fetch_jwks() -> None:
            response = await api.credential_issuer_jwks(CredentialIssuerJwksRequest(pretty=True))
            documents["jwks"] = response.response_content

        try:
            async with create_task_group() as tg:
                tg.start_soon(fetch_metadata)
                tg.start_soon(fetch_jwt_issuer)
                tg.start_soon(fetch_jwks)
        except* AuthleteApiError as group:
            for error in group.exceptions:
                print(f">>> Authlete API call failed: {error}")

    for name, content in documents.items():
        print(f">>> {name}:\n{content}")


if __name__ == "__main__":
    with contextlib.suppress(KeyboardInterrupt):
        anyio.run(main)
