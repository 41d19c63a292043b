"""Steam Community inventories: JSON models and fetching over HTTP."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

import requests

COMMUNITY_URL = "http://steamcommunity.com"

_APP_CONTEXT_RE = re.compile(r"var g_rgAppContextData = (.*?);")


class InventoryError(LookupError):
    """An inventory, item or API result could not be found or was unsuccessful."""


def _lookup(data: Mapping[str, Any], *names: str) -> Any:
    """Find a key by exact name first, then case-insensitively; None if absent."""
    for name in names:
        if name in data:
            return data[name]
    for name in names:
        wanted = name.lower()
        for key, value in data.items():
            if key.lower() == wanted:
                return value
    return None


def _uint(value: Any, name: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name}: expected an unsigned integer, got {value!r}")
    return value


def _string_uint(value: Any, name: str) -> int:
    if value is None:
        return 0
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise ValueError(f"{name}: expected an unsigned integer in a string, got {value!r}")


def _str(value: Any, name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{name}: expected a string, got {value!r}")
    return value


def _bool(value: Any, name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{name}: expected a boolean, got {value!r}")
    return value


def _object(value: Any, name: str, empty_list_allowed: bool = False) -> Dict[str, Any]:
    """Return a JSON object; null, and ``[]`` where allowed, count as empty."""
    if value is None:
        return {}
    if empty_list_allowed and value == []:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{name}: expected an object, got {value!r}")
    return value


def _list(value: Any, name: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{name}: expected a list, got {value!r}")
    return value


def parse_uint_bool(value: Any) -> bool:
    """Interpret a JSON unsigned number as a boolean: non-zero is true."""
    return _uint(value, "flag") != 0


@dataclass
class Item:
    id: int = 0
    class_id: int = 0
    instance_id: int = 0
    amount: int = 0
    pos: int = 0

    @classmethod
    def _from_json(cls, data: Mapping[str, Any]) -> "Item":
        return cls(
            id=_string_uint(_lookup(data, "id"), "id"),
            class_id=_string_uint(_lookup(data, "classid"), "classid"),
            instance_id=_string_uint(_lookup(data, "instanceid"), "instanceid"),
            amount=_string_uint(_lookup(data, "amount"), "amount"),
            pos=_uint(_lookup(data, "pos"), "pos"),
        )


@dataclass
class Currency:
    id: int = 0
    class_id: int = 0
    is_currency: bool = False
    pos: int = 0

    @classmethod
    def _from_json(cls, data: Mapping[str, Any]) -> "Currency":
        return cls(
            id=_string_uint(_lookup(data, "id"), "id"),
            class_id=_string_uint(_lookup(data, "classid"), "classid"),
            is_currency=_bool(_lookup(data, "is_currency"), "is_currency"),
            pos=_uint(_lookup(data, "pos"), "pos"),
        )


@dataclass
class DescriptionLine:
    value: str = ""
    type: Optional[str] = None  # "html" for HTML descriptions
    color: Optional[str] = None

    @classmethod
    def _from_json(cls, data: Mapping[str, Any]) -> "DescriptionLine":
        kind = _lookup(data, "type")
        color = _lookup(data, "color")
        return cls(
            value=_str(_lookup(data, "value"), "value"),
            type=None if kind is None else _str(kind, "type"),
            color=None if color is None else _str(color, "color"),
        )


@dataclass
class Action:
    name: str = ""
    link: str = ""

    @classmethod
    def _from_json(cls, data: Mapping[str, Any]) -> "Action":
        return cls(
            name=_str(_lookup(data, "name"), "name"),
            link=_str(_lookup(data, "link"), "link"),
        )


@dataclass
class Tag:
    internal_name: str = ""
    name: str = ""
    category: str = ""
    category_name: str = ""

    @classmethod
    def _from_json(cls, data: Mapping[str, Any]) -> "Tag":
        return cls(
            internal_name=_str(_lookup(data, "internal_name", "InternalName"), "internal_name"),
            name=_str(_lookup(data, "name"), "name"),
            category=_str(_lookup(data, "category"), "category"),
            category_name=_str(_lookup(data, "category_name", "CategoryName"), "category_name"),
        )


@dataclass
class Description:
    app_id: int = 0
    class_id: int = 0
    instance_id: int = 0
    icon_url: str = ""
    icon_url_large: str = ""
    icon_drag_url: str = ""
    name: str = ""
    market_name: str = ""
    market_hash_name: str = ""
    # Colours in hex, for example "B2B2B2".
    name_color: str = ""
    background_color: str = ""
    type: str = ""
    tradable: bool = False
    marketable: bool = False
    commodity: bool = False
    market_tradable_restriction: int = 0
    descriptions: List[DescriptionLine] = field(default_factory=list)
    actions: List[Action] = field(default_factory=list)
    # Application-specific data, like "def_index" and "quality" for TF2.
    app_data: Dict[str, str] = field(default_factory=dict)
    tags: List[Tag] = field(default_factory=list)

    @classmethod
    def _from_json(cls, data: Mapping[str, Any]) -> "Description":
        lines = _lookup(data, "descriptions")
        if lines == "":
            lines = None
        app_data = _object(_lookup(data, "AppData", "app_data"), "app_data")
        return cls(
            app_id=_string_uint(_lookup(data, "appid"), "appid"),
            class_id=_string_uint(_lookup(data, "classid"), "classid"),
            instance_id=_string_uint(_lookup(data, "instanceid"), "instanceid"),
            icon_url=_str(_lookup(data, "icon_url"), "icon_url"),
            icon_url_large=_str(_lookup(data, "icon_url_large"), "icon_url_large"),
            icon_drag_url=_str(_lookup(data, "icon_drag_url"), "icon_drag_url"),
            name=_str(_lookup(data, "name"), "name"),
            market_name=_str(_lookup(data, "market_name"), "market_name"),
            market_hash_name=_str(_lookup(data, "market_hash_name"), "market_hash_name"),
            name_color=_str(_lookup(data, "name_color"), "name_color"),
            background_color=_str(_lookup(data, "background_color"), "background_color"),
            type=_str(_lookup(data, "type"), "type"),
            tradable=_uint(_lookup(data, "tradable"), "tradable") != 0,
            marketable=_uint(_lookup(data, "marketable"), "marketable") != 0,
            commodity=_uint(_lookup(data, "commodity"), "commodity") != 0,
            market_tradable_restriction=_string_uint(
                _lookup(data, "market_tradable_restriction"), "market_tradable_restriction"
            ),
            descriptions=[
                DescriptionLine._from_json(line) for line in _list(lines, "descriptions")
            ],
            actions=[Action._from_json(a) for a in _list(_lookup(data, "actions"), "actions")],
            app_data={str(k): _str(v, "app_data") for k, v in app_data.items()},
            tags=[Tag._from_json(t) for t in _list(_lookup(data, "tags"), "tags")],
        )


@dataclass
class AppInfo:
    app_id: int = 0
    name: str = ""
    icon: str = ""
    link: str = ""

    @classmethod
    def _from_json(cls, data: Mapping[str, Any]) -> "AppInfo":
        return cls(
            app_id=_uint(_lookup(data, "appid"), "appid"),
            name=_str(_lookup(data, "name"), "name"),
            icon=_str(_lookup(data, "icon"), "icon"),
            link=_str(_lookup(data, "link"), "link"),
        )


@dataclass
class Inventory:
    """Items keyed by asset id, currencies, and descriptions keyed by ``class_instance``."""

    items: Dict[str, Item] = field(default_factory=dict)
    currencies: Dict[str, Currency] = field(default_factory=dict)
    descriptions: Dict[str, Description] = field(default_factory=dict)
    app_info: Optional[AppInfo] = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Inventory":
        """Build an inventory from a decoded JSON object."""
        items = _object(_lookup(data, "rgInventory"), "rgInventory", True)
        currencies = _object(_lookup(data, "rgCurrency"), "rgCurrency", True)
        descriptions = _object(_lookup(data, "rgDescriptions"), "rgDescriptions", True)
        app_info = _lookup(data, "rgAppInfo")
        return cls(
            items={k: Item._from_json(_object(v, "item")) for k, v in items.items()},
            currencies={
                k: Currency._from_json(_object(v, "currency")) for k, v in currencies.items()
            },
            descriptions={
                k: Description._from_json(_object(v, "description"))
                for k, v in descriptions.items()
            },
            app_info=None
            if app_info is None
            else AppInfo._from_json(_object(app_info, "rgAppInfo")),
        )

    def get_item(self, asset_id: int) -> Item:
        try:
            return self.items[str(asset_id)]
        except KeyError:
            raise InventoryError("item not found") from None

    def get_description(self, class_id: int, instance_id: int) -> Description:
        try:
            return self.descriptions[f"{class_id}_{instance_id}"]
        except KeyError:
            raise InventoryError("description not found") from None


class GenericInventory:
    """Inventories indexed by app id and then by context id."""

    def __init__(self) -> None:
        self._apps: Dict[int, Dict[int, Inventory]] = {}

    def get(self, app_id: int, context_id: int) -> Inventory:
        contexts = self._apps.get(app_id)
        if contexts is None:
            raise InventoryError("inventory for specified appId not found")
        inventory = contexts.get(context_id)
        if inventory is None:
            raise InventoryError("inventory for specified contextId not found")
        return inventory

    def add(self, app_id: int, context_id: int, inventory: Inventory) -> None:
        self._apps.setdefault(app_id, {})[context_id] = inventory


@dataclass
class Context:
    context_id: int = 0
    asset_count: int = 0
    name: str = ""

    @classmethod
    def _from_json(cls, data: Mapping[str, Any]) -> "Context":
        return cls(
            context_id=_string_uint(_lookup(data, "id"), "id"),
            asset_count=_uint(_lookup(data, "asset_count"), "asset_count"),
            name=_str(_lookup(data, "name"), "name"),
        )


@dataclass
class InventoryApp:
    app_id: int = 0
    name: str = ""
    icon: str = ""
    link: str = ""
    asset_count: int = 0
    inventory_logo: str = ""
    trade_permissions: str = ""
    contexts: Dict[str, Context] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "InventoryApp":
        """Build an app entry from a decoded JSON object."""
        contexts = _object(_lookup(data, "rgContexts"), "rgContexts")
        return cls(
            app_id=_uint(_lookup(data, "appid"), "appid"),
            name=_str(_lookup(data, "name"), "name"),
            icon=_str(_lookup(data, "icon"), "icon"),
            link=_str(_lookup(data, "link"), "link"),
            asset_count=_uint(_lookup(data, "asset_count"), "asset_count"),
            inventory_logo=_str(_lookup(data, "inventory_logo"), "inventory_logo"),
            trade_permissions=_str(_lookup(data, "trade_permissions"), "trade_permissions"),
            contexts={k: Context._from_json(_object(v, "context")) for k, v in contexts.items()},
        )

    def get_context(self, context_id: int) -> Context:
        try:
            return self.contexts[str(context_id)]
        except KeyError:
            raise InventoryError("context not found") from None


@dataclass
class PartialInventory:
    """One page of an inventory as sent by the Steam API."""

    success: bool = False
    error: str = ""
    inventory: Inventory = field(default_factory=Inventory)
    more: bool = False
    more_start: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "PartialInventory":
        """Build a page from a decoded JSON object; ``more_start: false`` means 0."""
        more_start = _lookup(data, "more_start")
        return cls(
            success=_bool(_lookup(data, "success"), "success"),
            error=_str(_lookup(data, "error"), "error"),
            inventory=Inventory.from_json(data),
            more=_bool(_lookup(data, "more"), "more"),
            more_start=0 if more_start is False else _uint(more_start, "more_start"),
        )


def parse_inventory_apps(data: Mapping[str, Any]) -> Dict[str, InventoryApp]:
    """Parse the app context data object, keyed by app id as a string."""
    return {
        key: InventoryApp.from_json(_object(value, "inventory app"))
        for key, value in _object(data, "inventory apps").items()
    }


def get_inventory_app(apps: Mapping[str, InventoryApp], app_id: int) -> InventoryApp:
    try:
        return apps[str(app_id)]
    except KeyError:
        raise InventoryError("inventory app not found") from None


def get_inventory_apps(
    session: requests.Session, steam_id: Union[int, str]
) -> Dict[str, InventoryApp]:
    """Scrape the list of inventory apps from a user's profile inventory page."""
    response = session.get(f"{COMMUNITY_URL}/profiles/{steam_id}/inventory/")
    match = _APP_CONTEXT_RE.search(response.text)
    if match is None:
        raise InventoryError("profile inventory not found in steam response")
    return parse_inventory_apps(json.loads(match.group(1)))


def do_inventory_request(
    session: requests.Session,
    request: Union[requests.Request, requests.PreparedRequest],
) -> PartialInventory:
    """Send the request and decode its JSON body as a partial inventory."""
    if isinstance(request, requests.Request):
        request = session.prepare_request(request)
    response = session.send(request)
    return PartialInventory.from_json(_object(response.json(), "inventory"))


def get_partial_own_inventory(
    session: requests.Session, context_id: int, app_id: int, start: Optional[int] = None
) -> PartialInventory:
    """Fetch one page of the logged-in user's tradable items."""
    url = f"{COMMUNITY_URL}/my/inventory/json/{app_id}/{context_id}?trading=1"
    if start is not None:
        url += f"&start={start}"
    return do_inventory_request(session, requests.Request("GET", url).prepare())


def get_own_inventory(session: requests.Session, context_id: int, app_id: int) -> Inventory:
    """Fetch every page of the logged-in user's tradable items."""
    return get_full_inventory(
        lambda: get_partial_own_inventory(session, context_id, app_id),
        lambda start: get_partial_own_inventory(session, context_id, app_id, start),
    )


def get_full_inventory(
    get_first: Callable[[], PartialInventory],
    get_next: Callable[[int], PartialInventory],
) -> Inventory:
    """Follow ``more``/``more_start`` paging and merge all pages into the first."""
    latest = get_first()
    if not latest.success:
        raise InventoryError("GetFullInventory API call failed: " + latest.error)
    result = latest.inventory
    while latest.more:
        latest = get_next(latest.more_start)
        if not latest.success:
            raise InventoryError("GetFullInventory API call failed: " + latest.error)
        result = merge(result, latest.inventory)
    return result


def merge(*args: Inventory) -> Inventory:
    """Merge the inventories into the first one, which is modified and returned."""
    if not args:
        raise ValueError("merge needs at least one inventory")
    first, *rest = args
    for other in rest:
        first.items.update(other.items)
        first.descriptions.update(other.descriptions)
        first.currencies.update(other.currencies)
    return first