# steamnet

`steamnet` is a library of low-level pieces for talking to the Steam network
from Python. It has these modules:

- **`steamnet.binary`** has the little-endian wire primitives:
  - readers such as `read_uint32`, `read_int64`, `read_bool`, `read_string` and `read_bytes`. They raise `EOFError` when the stream runs short.
  - the writer `write_bool`.
  - `WireStruct`, the base for every fixed-layout structure. A subclass lists its fields in `LAYOUT`. It gets `serialize`, `deserialize` and `to_bytes` from the base.
  - the message-type helpers `new_emsg` and `is_proto`. They strip or test the protobuf flag bit `0x80000000`.
- **`steamnet.cryptoutil`** does the channel cryptography:
  - `symmetric_encrypt` and `symmetric_decrypt` use AES/CBC with PKCS#7 padding. A random IV is prepended, and the IV itself is encrypted with AES/ECB.
  - `ecb_encrypt` and `ecb_decrypt` work on whole blocks only.
  - `pad_pkcs7_with_iv` and `unpad_pkcs7` handle the padding.
  - `parse_asn1_rsa_public_key` reads a DER SubjectPublicKeyInfo.
  - `rsa_encrypt` uses RSA-OAEP with SHA-1.
- **`steamnet.netutil`** has the network helpers:
  - `PortAddr` is a frozen IP-and-port pair with `to_tcp_addr`, `to_udp_addr` and `str()`.
  - `parse_port_addr` returns `None` for invalid input.
  - `new_post_form` builds an unsent, url-encoded `requests.PreparedRequest`.
  - `to_url_values` turns a flat mapping into form values.
- **`steamnet.community`** has `set_cookies`. It stores the `sessionid`, `steamLogin` and `steamLoginSecure` cookies for `steamcommunity.com` on a `requests.Session`. The session id is URL-escaped first.
- **`steamnet.connection`** has the TCP transport:
  - `dial_tcp` opens a connection and returns a `TcpConnection`.
  - `TcpConnection` reads and writes frames that carry a length and the `VT01` magic. It is also a context manager.
  - `set_encryption_key` takes a 32-byte key. After that, frames are encrypted and decrypted with `symmetric_encrypt` and `symmetric_decrypt`.
  - A frame with the wrong magic raises `InvalidMagicError`.
- **`steamnet.headers`** has the header layouts as `WireStruct` dataclasses: `MsgHdr`, `ExtendedClientMsgHdr`, `MsgGCHdr`, `UdpHeader`, `ChallengeData`, `ConnectData`, `Accept`, `Datagram` and `Disconnect`.
- **`steamnet.messages`** and **`steamnet.gs_messages`** hold the struct-backed message bodies. Examples are `MsgChannelEncryptRequest`, `MsgClientLogOnResponse`, `MsgGSKick` and `MsgClientChatEnter`. Each body carries its message type in the class attribute `emsg`.
- **`steamnet.protocol`** has the outgoing wrappers `Msg` and `ClientMsg`. `Msg` puts a `MsgHdr` on a body and payload. `ClientMsg` uses an `ExtendedClientMsgHdr` with session id and steam id. The module also has `format_job_id`, which renders the "no job" sentinel as `(none)`, and `valid_avatar`.
- **`steamnet.inventory`** handles Steam Community inventories:
  - dataclass models such as `Inventory`, `Item`, `Description`, `InventoryApp` and `PartialInventory`, built from decoded JSON with `from_json`.
  - `GenericInventory`, which indexes inventories by app id and context id.
  - `merge`, which combines inventories.
  - HTTP helpers: `get_inventory_apps`, `get_partial_own_inventory`, `get_own_inventory` (which follows paging), `get_full_inventory` and `do_inventory_request`.
  - Failed lookups and unsuccessful API answers raise `InventoryError`.

## Installation

```
pip install steamnet
```

## Examples

Encrypting a payload with a channel key:

```python
from steamnet.cryptoutil import symmetric_encrypt, symmetric_decrypt

key = bytes(32)  # session key agreed with the server
ciphertext = symmetric_encrypt(key, b"Hello World!")
assert symmetric_decrypt(key, ciphertext) == b"Hello World!"
```

Parsing a server address and reading one frame:

```python
from steamnet.netutil import parse_port_addr
from steamnet.connection import dial_tcp

addr = parse_port_addr("192.0.2.10:27017")
with dial_tcp(addr, None, 5.0) as conn:
    payload = conn.read()
```

Building a message for the wire:

```python
from steamnet.messages import MsgChannelEncryptResponse
from steamnet.protocol import Msg

data = Msg(MsgChannelEncryptResponse(), b"payload").to_bytes()
```

Reading a header back from bytes:

```python
import io
from steamnet.headers import MsgHdr

header = MsgHdr().deserialize(io.BytesIO(data))
print(header.msg, header.target_job_id)
```

Fetching your own inventory with a logged-in session:

```python
import requests
from steamnet.community import set_cookies
from steamnet.inventory import get_own_inventory

session = requests.Session()
set_cookies(session, "token", "token", "token")
inventory = get_own_inventory(session, 2, 440)  # context id, app id
for asset_id, item in inventory.items.items():
    print(asset_id, inventory.get_description(item.class_id, item.instance_id).name)
```

## What this package does not do

`steamnet` supplies building blocks, not a complete client. It does not include the following:

- a client that connects, negotiates channel encryption or logs on.
- heartbeats, an event loop, or a list of connection-manager servers.
- protobuf-backed messages, or parsing of incoming packets by their headers.
- a game coordinator.
- a command-line bot.

You put these together yourself from `dial_tcp`, `cryptoutil` and the message and header classes.

## Running the tests

```
pip install -e ".[test]"
pytest
```