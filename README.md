# bnbmsg

Message types for a DEX chain's transactions. The package builds these messages, validates
them and produces the canonical JSON bytes that a signer signs.

## Modules

- `bnbmsg.base`: chain constants, `ValidationError`, bech32 encoding (`bech32_encode`,
  `bech32_decode`), addresses (`AccAddress`, `ValAddress`), coins (`Coin`, `Coins`) and the
  abstract `Msg` interface.
- `bnbmsg.utils`: `sort_json`, the swap hashes `calculate_random_hash` and
  `calculate_swap_id`, the checksummed `hex_address`, and `hex_encode`, `hex_decode`
  and `has_0x_prefix`.
- `bnbmsg.symbols`: the token symbol rules `validate_symbol`, `validate_mini_token_symbol`,
  `is_valid_mini_token_symbol` and `split_suffixed_token_symbol`.
- `bnbmsg.prophecy`: oracle prophecies (`StatusText`, `Status`, `Prophecy`, `DBProphecy`),
  with conversion to and from their database form.
- `bnbmsg.send`: transfers (`Input`, `Output`, `SendMsg`, `Transfer`, `create_send_msg`)
  and `SetAccountFlagsMsg`.
- `bnbmsg.tokens`: `TokenBurnMsg`, `MintMsg`, `TokenFreezeMsg`, `TokenUnfreezeMsg`,
  `TransferOwnershipMsg` and `SetURIMsg`.
- `bnbmsg.issue`: `TokenIssueMsg`, `MiniTokenIssueMsg`, `TinyTokenIssueMsg`, and the
  symbol checks used at issue time.
- `bnbmsg.order`: `Side`, `OrderType`, `TimeInForce` and their helpers, `generate_order_id`,
  `CreateOrderMsg`, `CancelOrderMsg`, `DexListMsg` and `ListMiniMsg`.
- `bnbmsg.htlt`: atomic swaps (`HTLTMsg`, `DepositHTLTMsg`, `ClaimHTLTMsg`, `RefundHTLTMsg`).
- `bnbmsg.timelock`: `TimeLockMsg`, `TimeRelockMsg` and `TimeUnlockMsg`.
- `bnbmsg.bridge`: `SmartChainAddress`, `BindMsg`, `TransferOutMsg` and `UnbindMsg`.
- `bnbmsg.gov`: `VoteOption`, `ProposalKind`, `ListTradingPairParams`, `SubmitProposalMsg`,
  `DepositMsg` and `VoteMsg`.
- `bnbmsg.side_gov`: side-chain proposals, deposits and votes, plus the parameter sets
  (`SCChangeParams`, `IbcParams`, `OracleParams`, `SlashParams`, `StakeParams`,
  `CSCParamChange`) and their range checks.
- `bnbmsg.tx`: the signing document `StdSignMsg`, `std_sign_bytes`, the options
  `with_source`, `with_memo`, `with_ac_num_and_sequence` and `with_chain_id`, and the
  `StdSignature`, `StdTx`, `TxResult` and `TxCommitResult` records.

## Installation

```
pip install bnbmsg
```

## Usage

Every message has a `validate_basic()` method, which raises `ValidationError` when the
message is malformed. Every message also has a `to_json()` method and a `sign_bytes()`
method; the second returns compact JSON bytes.

```python
from bnbmsg.base import AccAddress, Coin, Coins
from bnbmsg.send import Transfer, create_send_msg
from bnbmsg.tx import StdSignMsg, with_memo

sender = AccAddress(bytes(20))
receiver = AccAddress(bytes([1]) * 20)

msg = create_send_msg(
    sender,
    Coins([Coin("BNB", 100)]),
    [Transfer(receiver, Coins([Coin("BNB", 100)]))],
)
msg.validate_basic()

doc = StdSignMsg(chain_id="Binance-Chain-Ganges", account_number=1, sequence=0, msgs=[msg])
doc = with_memo("hello")(doc)
payload = doc.sign_bytes()   # key-sorted JSON bytes
```

Addresses are `bytes` subclasses. `str()` on an address gives its bech32 form, which uses
the `bnb` prefix for accounts and `bva` for validators:

```python
print(sender.to_bech32())          # bnb1...
print(sender.to_bech32("tbnb"))    # same address with a testnet prefix
AccAddress.from_bech32(sender.to_bech32()) == sender   # True
```

### Symbols

```python
from bnbmsg.symbols import validate_symbol, is_valid_mini_token_symbol

validate_symbol("BNB")                  # native token, accepted
validate_symbol("XYZ-000")              # symbol plus a three-digit hex suffix
is_valid_mini_token_symbol("XYZ-000M")  # True
```

### Atomic swap helpers

```python
from bnbmsg.utils import calculate_random_hash, calculate_swap_id

random_hash = calculate_random_hash(bytes(32), 1_600_000_000)
swap_id = calculate_swap_id(random_hash, sender, "")
```

## What this package does not do

This package holds no keys and creates no signatures. `sign_bytes()` gives the bytes to
sign, and a `StdSignature` only records a signature that was made somewhere else. Nothing
in the package talks to a node or an API: it does not broadcast transactions and it does
not fetch accounts. Messages are serialised as JSON only. There is no binary transaction
encoding, no decoding of oracle claim payloads, and no staking or validator messages.

## Running the tests

```
pip install -e ".[test]"
pytest
```