#!/usr/bin/env python3
"""Demo: grant a permission, then prepare and send a call bundle with it.

Prerequisites
─────────────
1. A wallet endpoint that speaks ERC-7715 and EIP-5792 draft methods
2. Environment variables set:
     WALLET_ACCOUNT        – address the wallet controls
     WALLET_CHAIN_ID       – chain id (decimal or 0x-hex)

Optional env:
     WALLET_RPC_URL        – defaults to http://localhost:8545
     WALLET_RPC_RETRY_COUNT

Usage:
    python scripts/demo_wallet_permissions.py [recipient] [signature]

The wallet returns a hash to sign after prepare; pass the signature as the
second argument to actually submit the bundle.
"""

from __future__ import annotations

import logging
import sys
import time

from walletrpc import TransactionRequestError, WalletClient

# Anvil default account #1
ANVIL_ACCOUNT_1 = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"

ONE_ETHER = 10**18


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    recipient = sys.argv[1] if len(sys.argv) > 1 else ANVIL_ACCOUNT_1
    signature = sys.argv[2] if len(sys.argv) > 2 else None
    client = WalletClient.from_env()

    print(f"RPC              = {client.transport.url}")
    print(f"Account          = {client.account}")
    print(f"Chain            = {client.chain}")
    print()

    # 1) active permissions
    print("--- wallet_getActivePermissions ---")
    active = client.get_active_permissions()
    print(f"  active: {active}")
    print()

    # 2) grant
    print("--- wallet_grantPermissions ---")
    try:
        granted = client.grant_permissions(
            [
                {
                    "type": "native-token-transfer",
                    "data": {"ticker": "ETH"},
                    "policies": [
                        {"type": "token-allowance", "data": {"allowance": ONE_ETHER // 100}},
                        {"type": "rate-limit", "data": {"count": 10, "interval": 3600}},
                    ],
                    "required": True,
                    "expiry": int(time.time()) + 3600,
                    "signer": {"type": "wallet"},
                }
            ]
        )
    except TransactionRequestError as e:
        print(f"  rejected (code={e.code}): {e}")
        return
    print(f"  context: {granted['context']}")
    print()

    # 3) prepare
    print("--- wallet_prepareCalls ---")
    prepared = client.prepare_calls(
        [{"to": recipient, "data": "0x", "value": 10**15}],
        capabilities={"permissions": {"context": granted["context"]}},
    )
    bundle = prepared[0]
    print(f"  sign hash: {bundle['signatureRequest']['hash']}")
    print()

    if signature is None:
        print("no signature given; stopping before wallet_sendPreparedCalls")
        return

    # 4) send
    print("--- wallet_sendPreparedCalls ---")
    bundle_id = client.send_prepared_calls(
        bundle["preparedCalls"],
        {"type": "permissions", "values": {"signature": signature, "context": granted["context"]}},
    )
    print(f"  bundle id: {bundle_id}")


if __name__ == "__main__":
    main()
