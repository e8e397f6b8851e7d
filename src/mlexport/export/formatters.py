"""
Position-aware document formatters.

Each formatter maps (position, document) to a ready-to-write fragment of
bytes. JSON formatters frame the stream as a single array; CSV formatters
emit the header row together with the opening item.
"""

import json
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

from mlexport.logging import get_logger
from .position import Position

Document = Dict[str, Any]

# Header label and dotted field path for every search column
SEARCH_COLUMNS: Tuple[Tuple[str, str], ...] = (
    ("ID", "id"),
    ("Cantidad Vendida", "sold_quantity"),
    ("Precio", "price"),
    ("Moneda", "currency_id"),
    ("Vendedor", "seller.id"),
    ("Tipo Publicacion", "listing_type_id"),
    ("Titulo", "title"),
    ("Subtitulo", "subtitle"),
    ("Vencimiento", "stop_time"),
    ("Permalink", "permalink"),
)

ORDER_HEADERS: Tuple[str, ...] = (
    "ID", "Fecha Oferta",
    "Apodo Comprador", "Nombre Comprador", "Email Comprador", "Telefono Comprador",
    "Fecha Calificacion", "Estado Calificacion",
    "ID Item", "Titulo", "Cantidad", "Precio Unitario", "Moneda",
)

ORDER_ITEM_PATHS: Tuple[str, ...] = (
    "item.id", "item.title", "quantity", "unit_price", "currency_id",
)


class Formatter(Protocol):
    """Maps a positioned document to an output fragment"""

    def format(self, position: Position, doc: Document) -> bytes:
        ...


class UserLookup(Protocol):
    """Resolves a user id to the user document"""

    def user(self, user_id: Any) -> Document:
        ...


def get_path(doc: Any, path: str) -> Any:
    """
    Look up a dotted field path in a nested document.

    Args:
        doc: Document to search
        path: Dotted path such as ``seller.id``

    Returns:
        The value found, or None if any step is missing
    """
    value = doc
    for key in path.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(key)
        if value is None:
            return None
    return value


def csv_value(value: Any) -> str:
    """Render one CSV field; only numbers and booleans go unquoted"""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if value is None:
        value = ""
    # Embedded quotes are not escaped
    return f'"{value}"'


def line_to_csv(values: Sequence[Any]) -> bytes:
    """Join the values of one row, terminated by a single newline"""
    line = ",".join(csv_value(value) for value in values)
    return f"{line}\n".encode("utf-8")


class JsonFormatter:
    """Frames the stream as one JSON array, one compact document per line"""

    def encode(self, doc: Document) -> str:
        return json.dumps(doc, separators=(",", ":"), ensure_ascii=False)

    def format(self, position: Position, doc: Document) -> bytes:
        encoded = self.encode(doc)
        if position is Position.FIRST:
            fragment = f"[\n{encoded},\n"
        elif position is Position.MIDDLE:
            fragment = f"{encoded},\n"
        elif position is Position.LAST:
            fragment = f"{encoded}\n]\n"
        else:
            fragment = f"[\n{encoded}\n]\n"
        return fragment.encode("utf-8")


class CsvFormatter:
    """Base CSV formatter: header on the opening item, one row per item"""

    headers: Tuple[str, ...] = ()

    def row(self, doc: Document) -> List[Any]:
        raise NotImplementedError

    def format(self, position: Position, doc: Document) -> bytes:
        line = line_to_csv(self.row(doc))
        if position.opens:
            return line_to_csv(self.headers) + line
        return line


class SearchCsvFormatter(CsvFormatter):
    """CSV rows for item search results"""

    headers = tuple(header for header, _ in SEARCH_COLUMNS)
    paths = tuple(path for _, path in SEARCH_COLUMNS)

    def row(self, doc: Document) -> List[Any]:
        return [get_path(doc, path) for path in self.paths]


class SearchCsvWithNicknameFormatter(SearchCsvFormatter):
    """
    CSV rows for search results with the seller nickname resolved.

    The nickname goes in the "Vendedor" column and the raw seller id moves
    to an extra "ID Vendedor" column right after it. A failed lookup only
    blanks the nickname.
    """

    headers = (
        "ID", "Cantidad Vendida", "Precio", "Moneda", "Vendedor", "ID Vendedor",
        "Tipo Publicacion", "Titulo", "Subtitulo", "Vencimiento", "Permalink",
    )

    def __init__(self, lookup: UserLookup):
        self.lookup = lookup
        self.logger = get_logger("mlexport.export.formatters")

    def seller_nickname(self, seller_id: Any) -> str:
        if seller_id is None:
            return ""
        try:
            user = self.lookup.user(seller_id)
        except Exception as e:
            self.logger.warning(f"Nickname lookup failed for seller {seller_id}: {str(e)}")
            return ""

        nickname = get_path(user, "nickname")
        if isinstance(nickname, str):
            return nickname
        self.logger.warning(f"Seller {seller_id} has no nickname")
        return ""

    def row(self, doc: Document) -> List[Any]:
        seller_id = get_path(doc, "seller.id")
        values = super().row(doc)
        vendor = self.paths.index("seller.id")
        values[vendor] = self.seller_nickname(seller_id)
        values.insert(vendor + 1, seller_id)
        return values


class OrderCsvFormatter(CsvFormatter):
    """CSV rows for seller orders, one row per order"""

    headers = ORDER_HEADERS

    @staticmethod
    def buyer_name(buyer: Optional[Document]) -> str:
        parts = [get_path(buyer, "first_name"), get_path(buyer, "last_name")]
        return " ".join(str(part) for part in parts if part)

    @staticmethod
    def buyer_phone(buyer: Optional[Document]) -> str:
        number = get_path(buyer, "phone.number")
        number = "" if number is None else str(number)
        area_code = get_path(buyer, "phone.area_code")
        if area_code is None or not str(area_code).strip():
            return number
        return f"({area_code}) {number}"

    def row(self, doc: Document) -> List[Any]:
        buyer = get_path(doc, "buyer")
        values = [
            get_path(doc, "id"),
            get_path(doc, "date_created"),
            get_path(buyer, "nickname"),
            self.buyer_name(buyer),
            get_path(buyer, "email"),
            self.buyer_phone(buyer),
            get_path(doc, "feedback.sent.date_created"),
            get_path(doc, "feedback.sent.concretion_status"),
        ]

        order_items = get_path(doc, "order_items") or []
        order_item = order_items[0] if order_items else {}
        values.extend(get_path(order_item, path) for path in ORDER_ITEM_PATHS)
        return values
