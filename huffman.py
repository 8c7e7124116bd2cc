import heapq
import math
from collections import Counter
from itertools import count
from types import MappingProxyType
from typing import Dict, Hashable, Iterable, Iterator, List, Mapping, Optional, Tuple

from errors import EmptyAlphabetError, UnknownSymbolError


class HuffmanNode:
    """Node for a standard binary Huffman tree.

    :ivar symbol: The symbol stored at a leaf; ``None`` for internal nodes.
    :type symbol: Hashable | None
    :ivar weight: Total frequency of the leaves below (or at) this node.
    :type weight: int
    :ivar order: Sequence number assigned when the node entered the priority
        queue; breaks ties between equal weights, oldest first.
    :type order: int
    :ivar left: Left child node (``"0"`` branch).
    :type left: HuffmanNode | None
    :ivar right: Right child node (``"1"`` branch).
    :type right: HuffmanNode | None
    """

    __slots__ = ("symbol", "weight", "order", "left", "right")

    def __init__(self, symbol=None, weight=0, order=0, left=None, right=None):
        """Create a Huffman node.

        :param symbol: Symbol value for leaf nodes; ``None`` for internal nodes.
        :type symbol: Hashable | None
        :param int weight: Frequency (weight) associated with this node.
        :param int order: Priority-queue insertion sequence number.
        :param left: Left child node, if any.
        :type left: HuffmanNode|None
        :param right: Right child node, if any.
        :type right: HuffmanNode|None
        :returns: None
        :rtype: None
        :raises ValueError: If exactly one child is given.
        """
        if (left is None) != (right is None):
            raise ValueError("Internal nodes need exactly two children")
        self.symbol = symbol
        self.weight = weight
        self.order = order
        self.left = left
        self.right = right

    @property
    def is_leaf(self) -> bool:
        return self.left is None

    def __lt__(self, other):
        """Order nodes by ``(weight, order)`` for the priority queue.

        :param other: Another node to compare with.
        :type other: HuffmanNode
        :returns: ``True`` if this node should be merged before ``other``.
        :rtype: bool
        """
        return (self.weight, self.order) < (other.weight, other.order)

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode(symbol={self.symbol!r}, weight={self.weight})"
        return f"HuffmanNode(weight={self.weight}, order={self.order})"


def count_frequencies(text: Iterable[Hashable]) -> Dict[Hashable, int]:
    """Count how many times each symbol occurs in ``text``.

    Keys come out in order of first occurrence.

    :param text: Sample sequence of symbols.
    :type text: Iterable[Hashable]
    :returns: Mapping from symbol to occurrence count (empty for empty input).
    :rtype: Dict[Hashable, int]
    """
    return dict(Counter(text))


def build_tree(frequencies: Mapping[Hashable, int]) -> HuffmanNode:
    """Build a Huffman tree by repeatedly merging the two lightest nodes.

    Leaves are queued in the mapping's iteration order and every pushed node
    takes the next sequence number, so equal weights are merged oldest first.
    The first node popped becomes the left child of the merged node.

    :param frequencies: Mapping from symbol to observed frequency.
    :type frequencies: Mapping[Hashable, int]
    :returns: Root of the tree; a lone leaf for a single-symbol alphabet.
    :rtype: HuffmanNode
    :raises EmptyAlphabetError: If ``frequencies`` is empty.
    """
    if not frequencies:
        raise EmptyAlphabetError()

    sequence = count()
    heap = [
        HuffmanNode(symbol=sym, weight=freq, order=next(sequence))
        for sym, freq in frequencies.items()
    ]
    heapq.heapify(heap)

    while len(heap) > 1:
        left = heapq.heappop(heap)
        right = heapq.heappop(heap)
        merged = HuffmanNode(
            weight=left.weight + right.weight,
            order=next(sequence),
            left=left,
            right=right,
        )
        heapq.heappush(heap, merged)

    return heap[0]


class CodeTable:
    """Symbol to code mapping derived from a Huffman tree, plus its inverse.

    :ivar encode_of: Read-only mapping from symbol to its bit string.
    :type encode_of: Mapping[Hashable, str]
    :ivar decode_of: Read-only mapping from bit string to symbol.
    :type decode_of: Mapping[str, Hashable]
    """

    def __init__(self, codes: Mapping[Hashable, str]):
        """Wrap an already prefix-free ``symbol -> code`` assignment.

        :param codes: Mapping from symbol to its bit string.
        :type codes: Mapping[Hashable, str]
        :raises ValueError: If a code is empty or two symbols share a code.
        """
        encode_of: Dict[Hashable, str] = {}
        decode_of: Dict[str, Hashable] = {}
        for symbol, code in codes.items():
            if not code:
                raise ValueError(f"Empty code for symbol {symbol!r}")
            if code in decode_of:
                raise ValueError(f"Duplicate code {code!r}")
            encode_of[symbol] = code
            decode_of[code] = symbol
        self.encode_of = MappingProxyType(encode_of)
        self.decode_of = MappingProxyType(decode_of)

    @classmethod
    def from_tree(cls, root: HuffmanNode) -> "CodeTable":
        """Derive codes from the root-to-leaf paths of a Huffman tree.

        Left edges contribute ``"0"`` and right edges ``"1"``. A tree that is
        a single leaf gets the code ``"0"`` so that no code is empty.

        :param root: Root of the Huffman tree.
        :type root: HuffmanNode
        :returns: The derived code table.
        :rtype: CodeTable
        """
        if root.is_leaf:
            return cls({root.symbol: "0"})

        codes: Dict[Hashable, str] = {}
        stack: List[Tuple[HuffmanNode, str]] = [(root, "")]
        while stack:
            node, path = stack.pop()
            if node.is_leaf:
                codes[node.symbol] = path
            else:
                # right first so the left subtree is visited first
                stack.append((node.right, path + "1"))
                stack.append((node.left, path + "0"))
        return cls(codes)

    def code_for(self, symbol, position: Optional[int] = None) -> str:
        """Return the code of ``symbol``.

        :param symbol: Symbol to look up.
        :param position: Index of the symbol in the caller's text, reported
            in the error.
        :type position: int | None
        :returns: The symbol's bit string.
        :rtype: str
        :raises UnknownSymbolError: If ``symbol`` has no code.
        """
        try:
            return self.encode_of[symbol]
        except (KeyError, TypeError):  # TypeError: unhashable symbol
            raise UnknownSymbolError(symbol, position) from None

    def weighted_length(self, frequencies: Mapping[Hashable, int]) -> int:
        """Total bits needed to encode a text with the given frequencies.

        :param frequencies: Mapping from symbol to frequency.
        :type frequencies: Mapping[Hashable, int]
        :returns: ``sum(frequency * len(code))``.
        :rtype: int
        :raises UnknownSymbolError: If a symbol has no code.
        """
        return sum(freq * len(self.code_for(sym)) for sym, freq in frequencies.items())

    def fixed_width(self) -> int:
        """Bits per symbol of a fixed-length code for the same alphabet."""
        return max(1, math.ceil(math.log2(len(self.encode_of))))

    def max_code_length(self) -> int:
        return max(len(code) for code in self.decode_of)

    def __len__(self):
        return len(self.encode_of)

    def __contains__(self, symbol):
        try:
            return symbol in self.encode_of
        except TypeError:
            return False

    def __iter__(self) -> Iterator[Hashable]:
        """Iterate over symbols ordered by their codes."""
        for code in sorted(self.decode_of, key=lambda c: (len(c), c)):
            yield self.decode_of[code]

    def __repr__(self):
        return f"CodeTable({dict(self.encode_of)!r})"
