"""Testes para EmailService (POST /email e /email/batch)."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.postmark import (
    Attachment,
    Email,
    EmailResult,
    ErrorResponse,
    PostmarkClient,
)
from tests.fakes.fake_postmark_api import FakePostmarkApi
from utils.errors import ResponseDecodeError


@pytest.fixture
def api() -> FakePostmarkApi:
    return FakePostmarkApi()


@pytest.fixture
def client(api: FakePostmarkApi) -> PostmarkClient:
    return api.build_client(server_token="super-secret-server-token")


def _assert_email_headers(request: httpx.Request, server_token: str) -> None:
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["X-Postmark-Server-Token"] == server_token


class TestSend:
    """Testes para EmailService.send."""

    @pytest.fixture(autouse=True)
    def _ok_route(self, api: FakePostmarkApi) -> None:
        api.respond(
            "/email",
            json={"To": "receiver@example.com", "MessageID": "MessageID"},
        )

    def test_returns_result(self, client: PostmarkClient) -> None:
        """Resposta 200 é decodificada em EmailResult."""
        result, _ = client.email.send(Email())
        assert result == EmailResult(to="receiver@example.com", message_id="MessageID")
        assert result.submitted_at is None

    def test_posts_to_email_endpoint(self, client: PostmarkClient) -> None:
        """Envio usa POST /email."""
        _, response = client.email.send(Email())
        assert response.request.method == "POST"
        assert response.request.url.path == "/email"

    def test_uses_email_headers(self, client: PostmarkClient) -> None:
        """Os três headers obrigatórios vão na requisição."""
        _, response = client.email.send(Email())
        _assert_email_headers(response.request, "super-secret-server-token")

    def test_uses_token_set_after_construction(
        self, api: FakePostmarkApi, client: PostmarkClient
    ) -> None:
        """Token trocado depois da construção vale para o próximo envio."""
        client.server_token = "rotated"
        client.email.send(Email())
        _assert_email_headers(api.requests[-1], "rotated")

    def test_empty_email_sends_empty_object(
        self, api: FakePostmarkApi, client: PostmarkClient
    ) -> None:
        """Email sem campos vai como {}."""
        client.email.send(Email())
        assert json.loads(api.requests[0].content) == {}

    def test_payload_uses_wire_names_and_base64(
        self, api: FakePostmarkApi, client: PostmarkClient
    ) -> None:
        """Payload usa nomes de wire e anexos em base64."""
        email = Email(
            from_email="sender@example.com",
            to="receiver@example.com",
            subject="Subject",
            text_body="Body",
            attachments=[Attachment(name="a.txt", content="Content")],
        )
        client.email.send(email)
        assert json.loads(api.requests[0].content) == {
            "From": "sender@example.com",
            "To": "receiver@example.com",
            "Subject": "Subject",
            "TextBody": "Body",
            "Attachments": [{"Name": "a.txt", "Content": "Q29udGVudA=="}],
        }
        assert email.attachments is not None
        assert email.attachments[0].content == "Content"


class TestSendApiError:
    """Testes para erros da API no envio."""

    def test_returns_postmark_error(self, api: FakePostmarkApi, client: PostmarkClient) -> None:
        """Status 422 vira ErrorResponse com código, mensagem e resposta."""
        api.respond("/email", 422, json={"ErrorCode": 0, "Message": "Message"})
        with pytest.raises(ErrorResponse) as exc_info:
            client.email.send(Email())
        error = exc_info.value
        assert error == ErrorResponse(error.response, error_code=0, message="Message")
        assert error.response is not None
        assert error.response.status_code == 422
        assert error.response.request.url.path == "/email"

    def test_unexpected_shape_raises_decode_error(
        self, api: FakePostmarkApi, client: PostmarkClient
    ) -> None:
        """Resposta 2xx com lista no lugar de objeto falha a decodificação."""
        api.respond("/email", json=[{"To": "x", "MessageID": "y"}])
        with pytest.raises(ResponseDecodeError) as exc_info:
            client.email.send(Email())
        assert exc_info.value.response is not None

    def test_transport_error_propagates(self) -> None:
        """Falha de rede propaga antes de existir resposta."""

        def _timeout(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        http_client = httpx.Client(transport=httpx.MockTransport(_timeout))
        client = PostmarkClient(http_client, base_url="http://postmark.test")
        with pytest.raises(httpx.ReadTimeout):
            client.email.send(Email())


class TestSendBatch:
    """Testes para EmailService.send_batch."""

    @pytest.fixture(autouse=True)
    def _ok_route(self, api: FakePostmarkApi) -> None:
        api.respond(
            "/email/batch",
            json=[
                {"To": "receiver1@example.com", "MessageID": "MessageID1"},
                {"To": "receiver2@example.com", "MessageID": "MessageID2"},
            ],
        )

    def test_returns_results_in_order(self, client: PostmarkClient) -> None:
        """Resultados seguem a ordem do payload da API."""
        results, _ = client.email.send_batch([])
        assert results == [
            EmailResult(to="receiver1@example.com", message_id="MessageID1"),
            EmailResult(to="receiver2@example.com", message_id="MessageID2"),
        ]

    def test_posts_to_batch_endpoint(self, client: PostmarkClient) -> None:
        """Lote usa POST /email/batch."""
        _, response = client.email.send_batch([])
        assert response.request.method == "POST"
        assert response.request.url.path == "/email/batch"

    def test_uses_email_headers(self, client: PostmarkClient) -> None:
        """Os três headers obrigatórios vão na requisição de lote."""
        _, response = client.email.send_batch([])
        _assert_email_headers(response.request, "super-secret-server-token")

    def test_sends_json_array_in_order(
        self, api: FakePostmarkApi, client: PostmarkClient
    ) -> None:
        """Payload é um array JSON na ordem recebida."""
        emails = (Email(to="receiver1@example.com"), Email(to="receiver2@example.com"))
        client.email.send_batch(emails)
        assert json.loads(api.requests[0].content) == [
            {"To": "receiver1@example.com"},
            {"To": "receiver2@example.com"},
        ]

    def test_count_mismatch_is_not_validated(
        self, api: FakePostmarkApi, client: PostmarkClient
    ) -> None:
        """Quantidade de resultados não é conferida contra o request."""
        results, _ = client.email.send_batch([Email()])
        assert len(results) == 2

    def test_api_error(self, api: FakePostmarkApi, client: PostmarkClient) -> None:
        """Erro da API no lote vira ErrorResponse."""
        api.respond("/email/batch", 401, json={"ErrorCode": 10, "Message": "Bad token"})
        with pytest.raises(ErrorResponse) as exc_info:
            client.email.send_batch([Email()])
        assert exc_info.value.error_code == 10
        assert exc_info.value.message == "Bad token"
