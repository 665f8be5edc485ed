"""
Property-based tests for the Boolberry SDK.

These tests verify that properties hold true across many random inputs.
"""
import requests_mock
from hypothesis import given, settings, strategies as st

from boolberry_sdk import RPCError, WalletClient
from boolberry_sdk.models import Balance, TransferParams
from conftest import TEST_WALLET_URL, rpc_error, rpc_result

uint64 = st.integers(min_value=0, max_value=2**64 - 1)
hex_strategy = st.text(alphabet="0123456789abcdef", max_size=64)
destination_strategy = st.fixed_dictionaries({
    "amount": uint64,
    "address": st.text(min_size=1, max_size=120),
})


@settings(max_examples=50)
@given(
    destinations=st.lists(destination_strategy, min_size=1, max_size=5),
    fee=uint64,
    mixin=st.integers(min_value=0, max_value=100),
    unlock_time=uint64,
    payment_id=hex_strategy,
)
def test_transfer_params_round_trip(destinations, fee, mixin, unlock_time, payment_id):
    params = TransferParams(
        destinations=destinations,
        fee=fee,
        mixin=mixin,
        unlock_time=unlock_time,
        payment_id=payment_id,
    )

    decoded = TransferParams.model_validate_json(params.model_dump_json())

    assert decoded == params
    assert [d.model_dump() for d in decoded.destinations] == destinations


@settings(max_examples=50)
@given(balance=uint64, data=st.data())
def test_decoded_balance_never_exceeds_total(balance, data):
    unlocked = data.draw(st.integers(min_value=0, max_value=balance))
    decoded = Balance.model_validate({"balance": balance, "unlocked_balance": unlocked})
    assert decoded.unlocked_balance <= decoded.balance


@settings(max_examples=30, deadline=None)
@given(result=st.fixed_dictionaries({"balance": uint64}).flatmap(
    lambda d: st.fixed_dictionaries({
        "balance": st.just(d["balance"]),
        "unlocked_balance": st.integers(min_value=0, max_value=d["balance"]),
    })
))
def test_successful_result_is_returned_unchanged(result):
    with requests_mock.Mocker() as m:
        m.post(f"{TEST_WALLET_URL}/json_rpc", json=rpc_result(result))
        balance = WalletClient(TEST_WALLET_URL).get_balance()
    assert balance.model_dump() == result


@settings(max_examples=30, deadline=None)
@given(
    code=st.integers(min_value=-2**31, max_value=2**31 - 1).filter(lambda c: c != 0),
    message=st.text(max_size=200),
)
def test_rpc_error_message_is_verbatim(code, message):
    with requests_mock.Mocker() as m:
        m.post(f"{TEST_WALLET_URL}/json_rpc", json=rpc_error(code, message))
        try:
            WalletClient(TEST_WALLET_URL).get_balance()
        except RPCError as e:
            assert e.message == message
            assert str(e) == message
            assert e.code == code
        else:
            raise AssertionError("RPCError not raised")
