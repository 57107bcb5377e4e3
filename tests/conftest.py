"""Shared fixtures for NodeKit tests."""

import io

import pytest

IDENTITY = "[12,34,56,78,90,1,2,3]"
VOTE_ACCOUNT = "[98,76,54,32,10,9,8,7]"

FAKE_INSTALL_SCRIPT = b"#!/usr/bin/env bash\necho install\n"
FAKE_WATCHTOWER_TEMPLATE = (
    b"#!/usr/bin/env bash\n"
    b"# identities: {{ watchtower.flags.validator_identities | join(',') }}\n"
    b"# channels: {{ channels | join(',') }}\n"
)


class FakeAssets:
    """In-memory asset resolver that records which assets were opened."""

    def __init__(self, files):
        self.files = dict(files)
        self.opened = []
        self.streams = []

    def __call__(self, name):
        self.opened.append(name)
        if name not in self.files:
            raise FileNotFoundError(f"asset not bundled: {name}")
        stream = io.BytesIO(self.files[name])
        self.streams.append(stream)
        return stream


@pytest.fixture
def fake_assets():
    return FakeAssets(
        {
            "install.sh": FAKE_INSTALL_SCRIPT,
            "install.sh.j2": FAKE_WATCHTOWER_TEMPLATE,
        }
    )


@pytest.fixture
def firedancer_data():
    return {
        "keyPairs": {"identity": IDENTITY, "voteAccount": VOTE_ACCOUNT},
        "config": {
            "user": "sol",
            "dynamicPortRange": "8900-9000",
            "gossip": {"entrypoints": ["entrypoint.testnet.solana.com:8001"]},
            "consensus": {
                "identityPath": "/home/sol/validator-keypair.json",
                "voteAccountPath": "/home/sol/vote-account-keypair.json",
                "knownValidators": ["5D1fNXzvv5NjV1ysLjirC4WY92RNsVH18vjmcszZd8on"],
            },
            "rpc": {"port": 8899, "private": True},
            "layout": {"affinity": "1-8", "agaveAffinity": ""},
        },
    }


@pytest.fixture
def watchtower_data():
    return {
        "environment": {"rpcURL": "http://localhost:8899"},
        "flags": {
            "validatorIdentities": ["A", "B"],
            "intervalSeconds": 30,
        },
        "notifications": {
            "slack": {"webhookUrl": "https://hooks.slack.com/services/T/B/X"},
        },
    }
