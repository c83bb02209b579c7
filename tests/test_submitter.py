import pytest

from exchange.errors import SubmissionError
from exchange.models import Authorization
from trading.action_builder import ActionBuilder
from trading.submitter import TransactionSubmitter
from conftest import FakeTransport

pytestmark = pytest.mark.asyncio


async def test_attaches_authorization_once(auth, transport):
    builder = ActionBuilder("alice")
    submitter = TransactionSubmitter(transport, auth, blocks_behind=300, expire_seconds=3000)

    receipt = await submitter.submit([builder.build_cancel_action(1), builder.build_withdraw_action()])

    assert receipt.transaction_id == "tx1"
    call = transport.calls[0]
    assert call["blocks_behind"] == 300
    assert call["expire_seconds"] == 3000
    for action in call["actions"]:
        assert action["authorization"] == [{"actor": "alice", "permission": "active"}]


async def test_keeps_existing_authorization(auth, transport):
    other = Authorization(actor="bob", permission="trade")
    action = ActionBuilder("bob").build_cancel_action(9).with_authorization(other)

    await TransactionSubmitter(transport, auth).submit([action])

    assert transport.calls[0]["actions"][0]["authorization"] == [{"actor": "bob", "permission": "trade"}]


async def test_transport_error_is_wrapped(auth):
    boom = RuntimeError("expired transaction")
    submitter = TransactionSubmitter(FakeTransport(error=boom), auth)

    with pytest.raises(SubmissionError) as exc:
        await submitter.submit([ActionBuilder("alice").build_withdraw_action()])

    assert exc.value.cause is boom
    assert exc.value.__cause__ is boom
    assert "expired transaction" in str(exc.value)


async def test_empty_batch_rejected(auth, transport):
    with pytest.raises(ValueError):
        await TransactionSubmitter(transport, auth).submit([])
    assert transport.calls == []
