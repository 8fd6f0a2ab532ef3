import os

import pytest

from codechain.blockchain.exception import InvalidAddressError, InvalidTransactionError
from codechain.blockchain.transactions import Transaction, TransactionVersioner
from codechain.blockchain.transactions import ChangeAssetScheme, CreateShard, Pay, SetRegularKey, SetShardOwners
from codechain.blockchain.transactions import pay, set_regular_key, create_shard, set_shard_owners, change_asset_scheme
from codechain.blockchain.types import H160, H256, H512, PlatformAddress, TransactionTag
from tests.unit.blockchain.conftest import TxFactory

tx_versioner = TransactionVersioner()

all_type_names = [
    pay.type_name,
    set_regular_key.type_name,
    create_shard.type_name,
    set_shard_owners.type_name,
    change_asset_scheme.type_name
]


class TestTransaction:
    @pytest.mark.parametrize("type_", all_type_names)
    def test_type_name_and_tag_are_bound(self, tx_factory: TxFactory, type_):
        tx: Transaction = tx_factory(type_)

        assert tx.type() == type_
        assert tx_versioner.get_tag(type_) == tx.type_tag
        assert tx.to_encode_object()[0] == tx.type_tag

    @pytest.mark.parametrize("type_", all_type_names)
    def test_network_id_leads_fields(self, tx_factory: TxFactory, type_):
        tx: Transaction = tx_factory(type_)

        assert tx.to_encode_object()[1] == tx.network_id
        assert tx.to_json()["networkId"] == tx.network_id

    @pytest.mark.parametrize("type_", all_type_names)
    def test_encoding_is_deterministic(self, tx_factory: TxFactory, type_):
        tx: Transaction = tx_factory(type_)

        assert tx.rlp_bytes() == tx.rlp_bytes()
        assert tx.to_json() == tx.to_json()
        assert tx.hash() == tx.hash()

    @pytest.mark.parametrize("type_", all_type_names)
    def test_transaction_is_immutable(self, tx_factory: TxFactory, type_):
        tx: Transaction = tx_factory(type_)

        with pytest.raises(AttributeError):
            tx.network_id = "cc"

    def test_str_shows_fields(self, tx_factory: TxFactory):
        tx: Transaction = tx_factory(pay.type_name)

        assert str(tx).startswith("Transaction(network_id=tc, receiver=tcc")
        assert "quantity=10000" in str(tx)

    def test_aliases(self):
        assert Pay is pay.Transaction
        assert SetRegularKey is set_regular_key.Transaction
        assert CreateShard is create_shard.Transaction
        assert SetShardOwners is set_shard_owners.Transaction
        assert ChangeAssetScheme is change_asset_scheme.Transaction


class TestChangeAssetScheme:
    def test_encode_object(self, asset_type: H256):
        administrator = pytest.ADDRESSES[0]
        tx = ChangeAssetScheme(
            network_id="tc",
            asset_type=asset_type,
            metadata="{}",
            approver=None,
            administrator=administrator,
            approvals=["sig1", "sig2"]
        )

        assert tx.to_encode_object() == [
            0x15, "tc", asset_type, "{}", [], [administrator.account_id], ["sig1", "sig2"]
        ]

    def test_json(self, asset_type: H256):
        administrator = pytest.ADDRESSES[0]
        tx = ChangeAssetScheme(
            network_id="tc",
            asset_type=asset_type,
            metadata="{}",
            approver=None,
            administrator=administrator,
            approvals=["sig1", "sig2"]
        )

        assert tx.to_json() == {
            "networkId": "tc",
            "assetType": asset_type.to_encode_object(),
            "metadata": "{}",
            "approver": None,
            "administrator": str(administrator),
            "approvals": ["sig1", "sig2"]
        }

    @pytest.mark.parametrize("approver", [None, "present"])
    def test_null_approver_agrees_in_every_form(self, asset_type: H256, approver):
        if approver is not None:
            approver = pytest.ADDRESSES[1]

        tx = ChangeAssetScheme("tc", asset_type, "", approver, None)
        encoded = tx.to_encode_object()
        restored = change_asset_scheme.TransactionSerializer().from_rlp_bytes(tx.rlp_bytes())

        assert (tx.approver is None) == (encoded[4] == []) == (tx.to_json()["approver"] is None)
        assert restored.approver == tx.approver
        assert encoded[5] == []
        assert tx.to_json()["administrator"] is None

    def test_empty_approvals(self, asset_type: H256):
        tx = ChangeAssetScheme("tc", asset_type, "", None, None)

        assert tx.approvals == ()
        assert tx.to_encode_object()[6] == []
        assert tx.to_json()["approvals"] == []

    def test_approvals_keep_order(self, asset_type: H256):
        approvals = [f"sig{i}" for i in reversed(range(10))]
        tx = ChangeAssetScheme("tc", asset_type, "", None, None, approvals)

        assert tx.to_encode_object()[6] == approvals
        assert tx.to_json()["approvals"] == approvals

        restored = change_asset_scheme.TransactionSerializer().from_rlp_bytes(tx.rlp_bytes())
        assert list(restored.approvals) == approvals

    def test_addresses_are_normalized_at_construction(self, asset_type: H256):
        approver = pytest.ADDRESSES[2]
        tx = ChangeAssetScheme("tc", asset_type.hex_0x(), "", str(approver), str(approver).upper())

        assert tx.asset_type == asset_type
        assert tx.approver == approver
        assert tx.administrator == approver

    @pytest.mark.parametrize("field", ["approver", "administrator"])
    def test_malformed_address_fails_at_construction(self, asset_type: H256, field):
        kwargs = {"approver": None, "administrator": None, field: "tccqmalformed"}

        with pytest.raises(InvalidAddressError):
            ChangeAssetScheme(network_id="tc", asset_type=asset_type, metadata="", **kwargs)

    def test_malformed_asset_type_fails_at_construction(self):
        with pytest.raises(InvalidTransactionError):
            ChangeAssetScheme("tc", os.urandom(31), "", None, None)

    @pytest.mark.parametrize("approvals", ["sig1", [b"sig1"], [1]])
    def test_approvals_must_be_strings(self, asset_type: H256, approvals):
        with pytest.raises(InvalidTransactionError):
            ChangeAssetScheme("tc", asset_type, "", None, None, approvals)

    def test_metadata_must_be_string(self, asset_type: H256):
        with pytest.raises(InvalidTransactionError):
            ChangeAssetScheme("tc", asset_type, {}, None, None)


class TestPay:
    def test_rlp_bytes(self):
        account_id = H160(bytes(range(20)))
        tx = Pay("tc", PlatformAddress.from_account_id(account_id, "tc"), 0)

        assert tx.rlp_bytes() == bytes.fromhex("da02827463" + "94" + account_id.hex() + "80")

    def test_json(self):
        receiver = pytest.ADDRESSES[0]
        tx = Pay("tc", receiver, 255)

        assert tx.to_json() == {
            "networkId": "tc",
            "receiver": str(receiver),
            "quantity": "0xff"
        }

    @pytest.mark.parametrize("quantity", [-1, 2 ** 64, True, "1"])
    def test_invalid_quantity(self, quantity):
        with pytest.raises(InvalidTransactionError):
            Pay("tc", pytest.ADDRESSES[0], quantity)

    def test_invalid_receiver(self):
        with pytest.raises(InvalidAddressError):
            Pay("tc", pytest.ADDRESSES[0].account_id, 1)

    @pytest.mark.parametrize("network_id", [None, "0x", "TC", "tcc"])
    def test_invalid_network_id(self, network_id):
        with pytest.raises(InvalidTransactionError):
            Pay(network_id, pytest.ADDRESSES[0], 1)


class TestSetRegularKey:
    def test_encode_object(self):
        key = H512(os.urandom(H512.size))
        tx = SetRegularKey("tc", key)

        assert tx.to_encode_object() == [TransactionTag.set_regular_key, "tc", key]
        assert tx.to_json() == {"networkId": "tc", "key": key.hex_0x()}

    def test_invalid_key(self):
        with pytest.raises(InvalidTransactionError):
            SetRegularKey("tc", os.urandom(32))


class TestShards:
    def test_create_shard_without_users(self):
        tx = CreateShard("tc")

        assert tx.to_encode_object() == [TransactionTag.create_shard, "tc", []]
        assert tx.to_json() == {"networkId": "tc", "users": []}

    def test_set_shard_owners(self):
        owners = pytest.ADDRESSES[:2]
        tx = SetShardOwners("tc", 3, owners)

        assert tx.to_encode_object() == [
            TransactionTag.set_shard_owners, "tc", 3, [owner.account_id for owner in owners]
        ]
        assert tx.to_json() == {"networkId": "tc", "shardId": 3, "owners": [str(owner) for owner in owners]}

    @pytest.mark.parametrize("shard_id", [-1, 0x10000, None])
    def test_invalid_shard_id(self, shard_id):
        with pytest.raises(InvalidTransactionError):
            SetShardOwners("tc", shard_id, pytest.ADDRESSES[:1])

    def test_owners_must_not_be_empty(self):
        with pytest.raises(InvalidTransactionError):
            SetShardOwners("tc", 0, [])


class TestKnownVectors:
    asset_type = H256(bytes(range(32)))
    administrator = "tccq9h7vnl68frvqapzv3tujrxtxtwqdnxw6yamrrgd"

    def test_change_asset_scheme_rlp_bytes(self):
        tx = ChangeAssetScheme(
            network_id="tc",
            asset_type=self.asset_type,
            metadata="{}",
            approver=None,
            administrator=self.administrator,
            approvals=["sig1", "sig2"]
        )

        assert tx.rlp_bytes() == bytes.fromhex(
            "f84a15827463"
            "a0" + self.asset_type.hex() +
            "827b7d"
            "c0"
            "d594" "6fe64ffa3a46c074226457c90ccb32dc06ccced1"
            "ca" "8473696731" "8473696732"
        )

    def test_signature_approval_is_written_as_bytes(self):
        signature = "0x" + "ab" * 65
        tx = ChangeAssetScheme("tc", self.asset_type, "{}", None, None, [signature])

        rlp_bytes = tx.rlp_bytes()

        assert len(rlp_bytes) == 113
        assert rlp_bytes == bytes.fromhex(
            "f86f15827463"
            "a0" + self.asset_type.hex() +
            "827b7d"
            "c0"
            "c0"
            "f843" "b841" + "ab" * 65
        )

        restored = change_asset_scheme.TransactionSerializer().from_rlp_bytes(rlp_bytes)
        assert restored.approvals == (signature,)
        assert restored == tx

    def test_hex_approval_is_normalized(self):
        tx = ChangeAssetScheme("tc", self.asset_type, "0xABCD", None, None, ["0xABCD"])

        assert tx.metadata == "0xabcd"
        assert tx.approvals == ("0xabcd",)
        assert change_asset_scheme.TransactionSerializer().from_rlp_bytes(tx.rlp_bytes()) == tx
        assert change_asset_scheme.TransactionSerializer().from_json(tx.to_json()) == tx


class TestAddressNetwork:
    @staticmethod
    def _other_network(address: PlatformAddress) -> PlatformAddress:
        return PlatformAddress.from_account_id(address.account_id, "sc")

    def test_pay(self):
        with pytest.raises(InvalidAddressError):
            Pay("tc", self._other_network(pytest.ADDRESSES[0]), 1)

    def test_create_shard(self):
        with pytest.raises(InvalidAddressError):
            CreateShard("tc", [pytest.ADDRESSES[0], self._other_network(pytest.ADDRESSES[1])])

    def test_set_shard_owners(self):
        with pytest.raises(InvalidAddressError):
            SetShardOwners("tc", 1, [self._other_network(pytest.ADDRESSES[0])])

    @pytest.mark.parametrize("field", ["approver", "administrator"])
    def test_change_asset_scheme(self, asset_type: H256, field):
        kwargs = {"approver": None, "administrator": None, field: self._other_network(pytest.ADDRESSES[0])}

        with pytest.raises(InvalidAddressError):
            ChangeAssetScheme(network_id="tc", asset_type=asset_type, metadata="{}", approvals=["sig1"], **kwargs)

    def test_same_network_round_trips(self, asset_type: H256):
        address = PlatformAddress.from_account_id(pytest.ADDRESSES[0].account_id, "sc")
        tx = ChangeAssetScheme("sc", asset_type, "{}", None, address, ["sig1"])

        restored = change_asset_scheme.TransactionSerializer().from_rlp_bytes(tx.rlp_bytes())

        assert restored == tx
        assert restored.to_json() == tx.to_json()
