class HuffmanError(ValueError):
    """Base class for errors raised while building or applying a Huffman code."""


class EmptyAlphabetError(HuffmanError):
    """Raised when a code is requested for a sample with no symbols."""

    def __init__(self, message: str = "Cannot build a Huffman code from an empty sample"):
        super().__init__(message)


class UnknownSymbolError(HuffmanError):
    """Raised when encoding a symbol that was not in the sample text.

    :ivar symbol: The offending symbol.
    :ivar position: Index of the symbol in the text being encoded, if known.
    :type position: int | None
    """

    def __init__(self, symbol, position=None):
        self.symbol = symbol
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Unknown symbol {symbol!r}{where}")


class MalformedCodeError(HuffmanError):
    """Raised when a bit string cannot be decoded.

    :ivar position: Index of the bit where decoding failed.
    :type position: int
    """

    def __init__(self, message: str, position: int):
        self.position = position
        super().__init__(f"{message} (bit {position})")
