from .data_gateway import DataGateway, Join, Row, encode_filter, parse_filter

__all__ = [
    "DataGateway",
    "Join",
    "Row",
    "encode_filter",
    "parse_filter",
]
