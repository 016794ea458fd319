"""
Gas.zip chain registry: protocol chain id -> (display name, native chain id).

Gas.zip numbers its destination networks with small protocol-internal ids
(distinct from the public EVM chain ids). The table below is the outbound
chain list published by Gas.zip; it is built once at import time and never
mutated, so it can be shared freely across threads.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import NamedTuple


class ChainInfo(NamedTuple):
    """Registry entry for one protocol chain id."""
    name: str
    native_id: int


class ChainRegistry:
    """
    Immutable id -> ChainInfo mapping.

    Usage:
        info = GASZIP_CHAINS.lookup(54)   # ChainInfo(name='Base Mainnet', native_id=8453)
        255 in GASZIP_CHAINS              # True
    """

    def __init__(self, entries: Mapping[int, tuple[str, int]]) -> None:
        self._entries: Mapping[int, ChainInfo] = MappingProxyType(
            {int(chain_id): ChainInfo(*info) for chain_id, info in entries.items()}
        )

    def lookup(self, chain_id: int) -> ChainInfo | None:
        """Return the entry for a protocol chain id, or None if unregistered."""
        return self._entries.get(chain_id)

    def items(self) -> list[tuple[int, ChainInfo]]:
        """All entries sorted by protocol id."""
        return sorted(self._entries.items())

    def __contains__(self, chain_id: object) -> bool:
        return chain_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._entries))

    def __repr__(self) -> str:
        return f"ChainRegistry({len(self)} chains)"


# Gas.zip outbound chains (protocol id: (name, native chain id))
_GASZIP_CHAIN_TABLE: dict[int, tuple[str, int]] = {
    110: ("Abstract", 2741),
    493: ("Adventure Layer", 9988),
    261: ("AILayer", 2649),
    297: ("Aleph Zero EVM", 41455),
    233: ("AlienX", 10241024),
    128: ("Ancient8", 888888888),
    445: ("Animechain", 69000),
    296: ("ApeChain", 33139),
    401: ("AppChain", 466),
    348: ("Aptos", 1000011),
    53: ("Arbitrum Nova", 42170),
    57: ("Arbitrum One", 42161),
    40: ("Astar", 592),
    62: ("Aurora", 1313161554),
    15: ("Avalanche", 43114),
    278: ("B3", 8333),
    292: ("Bahamut", 5165),
    54: ("Base Mainnet", 8453),
    479: ("Battle for Blockchain", 3920262608331171),
    24: ("Beam", 4337),
    143: ("Berachain", 80094),
    138: ("BEVM", 11501),
    85: ("BiFrost", 3068),
    147: ("Bitlayer", 200901),
    494: ("Bittensor EVM", 964),
    96: ("Blast", 81457),
    150: ("BOB", 60808),
    411: ("Boba BNB", 56288),
    140: ("Boba ETH", 288),
    496: ("Botanix", 3637),
    14: ("BSC Mainnet", 56),
    148: ("B² Network", 223),
    126: ("Callisto", 820),
    502: ("CAMP", 484),
    21: ("Celo", 42220),
    333: ("CheeseChain", 383353),
    458: ("Civitia", 1000024),
    357: ("Codex", 81224),
    65: ("ConFlux", 1030),
    498: ("Converge", 432),
    416: ("Conwai", 668668),
    34: ("CoreDAO", 1116),
    391: ("Corn", 21000000),
    36: ("Cronos", 25),
    276: ("Cronos zkEVM", 388),
    135: ("Cyber", 7560),
    300: ("DeBank", 20240603),
    133: ("Degen", 666666666),
    365: ("Derive", 957),
    63: ("Dexalot", 432204),
    46: ("Dogechain", 2000),
    134: ("Dymension", 1100),
    459: ("Echelon", 1000025),
    328: ("Eclipse", 1000002),
    489: ("EDU", 41923),
    474: ("Embr", 2598901095158506),
    302: ("Endurance", 648),
    142: ("EOS EVM", 17777),
    255: ("Ethereum", 1),
    346: ("Etherlink", 42793),
    364: ("Ethernity", 183),
    71: ("ETHW", 10001),
    491: ("Everclear", 25327),
    39: ("EVMOS", 9001),
    403: ("ExSat", 7200),
    20: ("Fantom", 250),
    354: ("Flame", 253368190),
    38: ("Flare", 14),
    437: ("Flow EVM", 747),
    304: ("Fluence", 9999999),
    383: ("Form", 478),
    267: ("Forma", 984122),
    10: ("Fraxtal", 252),
    339: ("Fuel", 1000006),
    31: ("Fuse", 122),
    431: ("G7", 2187),
    16: ("Gnosis", 100),
    440: ("GOAT", 2345),
    240: ("Gravity", 1625),
    247: ("Ham", 5112),
    66: ("Harmony", 1666600000),
    408: ("Hashkey", 177),
    397: ("Hemi", 43111),
    495: ("Humanity", 6985385),
    501: ("Humanode", 5234),
    132: ("Hychain", 2911),
    291: ("HyperCore", 88778877),
    430: ("HyperEVM", 999),
    95: ("Immutable zkEVM", 13371),
    480: ("ING", 2780922216980457),
    456: ("Initia", 1000023),
    78: ("Injective EVM", 2525),
    392: ("Ink", 57073),
    460: ("INRT", 1000026),
    461: ("Intergaze", 1000027),
    67: ("IoTeX", 4689),
    33: ("Kaia", 8217),
    485: ("Katana", 747474),
    22: ("Kava", 2222),
    90: ("KCC", 321),
    478: ("LayerEdge", 4207),
    442: ("Lens", 232),
    79: ("Lightlink", 1890),
    59: ("Linea", 59144),
    238: ("Lisk", 1135),
    87: ("Lukso", 42),
    332: ("Lumia Prism", 994873017),
    100: ("Lumio", 8866),
    60: ("Manta", 169),
    13: ("Mantle Mainnet", 5000),
    294: ("Matchain", 698),
    9: ("Merlin", 4200),
    144: ("Metal", 1750),
    26: ("Meter", 82),
    30: ("Metis", 1088),
    499: ("Mezo", 31612),
    483: ("MilkyWay", 1000033),
    407: ("Mind", 228),
    253: ("Mint", 185),
    503: ("Mitosis", 124816),
    73: ("Mode", 34443),
    28: ("Moonbeam", 1284),
    29: ("Moonriver", 1285),
    340: ("Morph", 2818),
    97: ("Muster Network", 4078),
    92: ("Neon EVM", 245022934),
    477: ("Nibiru", 6900),
    259: ("Numbers", 10507),
    23: ("Oasis Emerald", 42262),
    69: ("Oasys", 248),
    490: ("OEV API3", 4913),
    35: ("OKX", 66),
    492: ("Onyx", 80888),
    55: ("OP Mainnet", 10),
    58: ("opBNB", 204),
    236: ("Optopia", 62050),
    74: ("Orderly", 291),
    423: ("Peaq", 3338),
    88: ("PEGO", 20201022),
    422: ("Phala", 2035),
    5: ("PlatON", 210425),
    450: ("Plume", 98866),
    17: ("Polygon", 137),
    52: ("Polygon zkEVM", 1101),
    367: ("Polynomial", 8008),
    448: ("Powerloom V2", 7869),
    378: ("Prom", 227),
    98: ("Proof of Play Apex", 70700),
    293: ("Proof of Play Boss", 70701),
    12: ("Pulsechain", 369),
    452: ("R5 Testnet", 337),
    298: ("Race", 6805),
    82: ("Rari", 1380012617),
    482: ("Rave", 555110192329996),
    149: ("Redstone", 690),
    466: ("Rena Nuwa", 1000032),
    234: ("Reya", 1729),
    396: ("River", 550),
    413: ("Ronin", 2020),
    254: ("Rootstock", 30),
    125: ("RSS3", 12553),
    295: ("Saakuru", 7225878),
    131: ("Sanko", 1996),
    6: ("SatoshiVM", 3109),
    246: ("Sei", 1329),
    443: ("Settlus", 5371),
    327: ("Shape", 360),
    455: ("zkCandy", 320),
    398: ("Skate", 5050),
    287: ("Snaxchain", 2192),
    245: ("Solana", 501474),
    504: ("Somnia", 5031),
    414: ("Soneium", 1868),
    389: ("Sonic", 146),
    410: ("Soon Mainnet", 1000020),
    484: ("Sophon", 50104),
    406: ("Spotlight", 10058111),
    64: ("Step", 1234),
    181: ("Story", 1514),
    347: ("Sui", 1000010),
    303: ("Superposition", 55244),
    366: ("Superseed", 5330),
    256: ("Swan", 254),
    385: ("Swell", 1923),
    19: ("SX Network", 416),
    137: ("Syndicate Frame", 5101),
    249: ("Taiko", 167000),
    47: ("Telos", 40),
    27: ("Tenet", 1559),
    258: ("ThunderCore", 108),
    75: ("Tron", 1000001),
    394: ("U2U Solaris", 39),
    362: ("Unichain", 130),
    419: ("UNIT0", 88811),
    488: ("Vana", 1480),
    395: ("Vanar", 2040),
    43: ("Viction", 88),
    301: ("Vizing", 28518),
    81: ("Wemix", 1111),
    269: ("WorldChain", 480),
    146: ("X Layer", 196),
    77: ("XAI", 660279),
    242: ("XCHAIN", 94524),
    420: ("XDC", 50),
    48: ("XPLA", 37),
    377: ("XRP", 1000016),
    487: ("XRPL EVM", 1440000),
    239: ("Xterio", 2702128),
    471: ("Yominet EVM", 428962654539583),
    481: ("Zaar", 1335097526422335),
    361: ("ZERO", 543210),
    94: ("Zeta", 7000),
    353: ("Zircuit", 48900),
    50: ("zkFair", 42766),
    136: ("zkLink Nova", 810180),
    41: ("zkScroll", 534352),
    51: ("zkSync Era", 324),
    56: ("Zora", 7777777),
}

GASZIP_CHAINS = ChainRegistry(_GASZIP_CHAIN_TABLE)
