"""
Errors raised while loading or decoding a TimeZone.
"""


class TimeZoneError(ValueError):
    # Makes exact assertions on raised errors simple to write.
    def __eq__(self, other):
        return (other.__class__ == self.__class__) and other.args == self.args

    def __hash__(self):
        return hash(self.args)


class ZoneNotFound(TimeZoneError):
    def __init__(self, name: str):
        super().__init__(f"unknown time zone {name!r}")
        self.name = name


class UnsupportedLocalZone(TimeZoneError):
    def __init__(self):
        super().__init__("unsupported zone: Local")


class NullValueUnsupported(TimeZoneError):
    def __init__(self):
        super().__init__("converting NULL to TimeZone is unsupported")


class MalformedEncoding(TimeZoneError):
    pass
