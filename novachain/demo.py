"""Minimal wallet, bridge and consensus actions used by the command-line demo."""

from __future__ import annotations


def propose() -> list[str]:
    """Announce that consensus is packing a block; return the lines printed."""
    message = "共识打包区块"
    print(message)
    return [message]


def lock(amount: int) -> list[str]:
    """Lock ``amount`` coins on the bridge, then propose a block.

    Returns every line printed along the way.
    """
    message = f"桥锁住 币: {amount}"
    print(message)
    return [message, *propose()]


def send(amount: int) -> list[str]:
    """Send ``amount`` coins from the wallet, locking them on the bridge.

    Returns every line printed along the way.
    """
    message = f"钱包发送 币: {amount}"
    print(message)
    return [message, *lock(amount)]