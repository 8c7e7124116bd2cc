from types import MappingProxyType
from typing import Dict, Hashable, List, Mapping, Sequence

from errors import EmptyAlphabetError, MalformedCodeError
from huffman import CodeTable, build_tree, count_frequencies


class DecodeTrie:
    """Binary trie over a prefix-free code, stored as an arena of nodes.

    Node ``0`` is the root. ``children[n]`` holds the handles of the ``"0"``
    and ``"1"`` children of node ``n`` (``-1`` when absent); ``symbols`` maps
    leaf handles to their symbol.

    :ivar children: Child handles per node.
    :type children: List[List[int]]
    :ivar symbols: Mapping from leaf handle to symbol.
    :type symbols: Dict[int, Hashable]
    """

    ROOT = 0

    def __init__(self, decode_of: Mapping[str, Hashable]):
        """Build the trie from a ``code -> symbol`` mapping.

        :param decode_of: Mapping from bit string to symbol.
        :type decode_of: Mapping[str, Hashable]
        :raises ValueError: If the codes are not prefix-free or contain
            characters other than ``"0"`` and ``"1"``.
        """
        self.children: List[List[int]] = [[-1, -1]]
        self.symbols: Dict[int, Hashable] = {}
        for code, symbol in decode_of.items():
            self._insert(code, symbol)

    def _insert(self, code: str, symbol) -> None:
        if not code:
            raise ValueError("Empty code")
        node = self.ROOT
        for ch in code:
            if node in self.symbols:
                raise ValueError(f"Code {code!r} extends another code")
            if ch not in ("0", "1"):
                raise ValueError(f"Invalid bit {ch!r} in code {code!r}")
            bit = int(ch)
            nxt = self.children[node][bit]
            if nxt == -1:
                nxt = len(self.children)
                self.children.append([-1, -1])
                self.children[node][bit] = nxt
            node = nxt
        if node in self.symbols or self.children[node] != [-1, -1]:
            raise ValueError(f"Code {code!r} is a prefix of another code")
        self.symbols[node] = symbol

    def __len__(self):
        return len(self.symbols)


class HuffmanCodec:
    """Huffman encoder/decoder trained on a sample text.

    The tree and code tables are built once in the constructor and never
    modified afterwards, so one instance can serve any number of callers.

    :ivar frequencies: Read-only mapping from symbol to its count in the sample.
    :type frequencies: Mapping[Hashable, int]
    :ivar root: Root of the Huffman tree.
    :type root: huffman.HuffmanNode
    :ivar table: Code table derived from the tree.
    :type table: CodeTable
    """

    def __init__(self, sample_text: Sequence[Hashable]):
        """Count symbols in ``sample_text`` and derive the code.

        :param sample_text: Text whose symbol frequencies define the code.
            A ``str`` yields characters, ``bytes`` yields byte values; any
            other sequence is taken item by item.
        :type sample_text: Sequence[Hashable]
        :raises EmptyAlphabetError: If ``sample_text`` is empty.
        """
        if isinstance(sample_text, str):
            self._kind = str
        elif isinstance(sample_text, (bytes, bytearray)):
            self._kind = bytes
        else:
            self._kind = list
        freqs = count_frequencies(sample_text)
        if not freqs:
            raise EmptyAlphabetError()
        self.frequencies = MappingProxyType(freqs)
        self.root = build_tree(freqs)
        self.table = CodeTable.from_tree(self.root)
        self._trie = DecodeTrie(self.table.decode_of)

    @property
    def encode_of(self) -> Mapping[Hashable, str]:
        return self.table.encode_of

    @property
    def decode_of(self) -> Mapping[str, Hashable]:
        return self.table.decode_of

    def encode(self, text: Sequence[Hashable]) -> str:
        """Encode ``text`` as a string of ``"0"``/``"1"`` characters.

        :param text: Symbols to encode.
        :type text: Sequence[Hashable]
        :returns: Concatenated codes of the symbols, in order.
        :rtype: str
        :raises UnknownSymbolError: If ``text`` contains a symbol that did not
            occur in the sample text.
        """
        return "".join(
            self.table.code_for(symbol, pos) for pos, symbol in enumerate(text)
        )

    def decode(self, bits: str):
        """Decode a bit string produced by :meth:`encode`.

        :param bits: String of ``"0"``/``"1"`` characters.
        :type bits: str
        :returns: Decoded text, of the same kind as the sample text
            (``str``, ``bytes`` or ``list``).
        :raises MalformedCodeError: If ``bits`` contains anything other than
            ``"0"``/``"1"``, follows no code, or ends in the middle of a code.
        """
        children = self._trie.children
        symbols = self._trie.symbols
        out = []
        node = DecodeTrie.ROOT
        for pos, ch in enumerate(bits):
            if ch == "0":
                node = children[node][0]
            elif ch == "1":
                node = children[node][1]
            else:
                raise MalformedCodeError(f"Invalid bit {ch!r}", pos)
            if node == -1:
                raise MalformedCodeError("Bit sequence matches no code", pos)
            if node in symbols:
                out.append(symbols[node])
                node = DecodeTrie.ROOT
        if node != DecodeTrie.ROOT:
            raise MalformedCodeError("Bit sequence ends inside a code", len(bits))

        if self._kind is str:
            return "".join(out)
        if self._kind is bytes:
            return bytes(out)
        return out

    def __repr__(self):
        return f"HuffmanCodec(symbols={len(self.table)})"
