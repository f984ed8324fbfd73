from .conv import date_key, parse_date, to_dec, to_dec_strict

__all__ = ["to_dec", "to_dec_strict", "parse_date", "date_key"]
