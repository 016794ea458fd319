"""
Decode a handful of Gas.zip deposit calldatas and print what each one says.
"""

from gaszip_decoder import DecodeError, decode_calldata

SAMPLES = [
    "0x02" + "11" * 20 + "0036",                 # EVM address -> Base
    "0x01" + "0037" + "0038",                     # self deposit -> OP, Zora
    "0x03" + "0b" * 32 + "00f5",                  # Solana address -> Solana
    "0x05" + "8b" * 20 + "0179",                  # XRP account -> XRP
    "0x06" + "22" * 20 + "01c8",                  # Initia address -> Initia
    "0x02" + "11" * 19,                           # truncated EVM address
]


def main():
    for calldata in SAMPLES:
        print(f"> {calldata[:24]}...")
        try:
            decoded = decode_calldata(calldata)
        except DecodeError as e:
            print(f"  error [{e.kind.value}]: {e}\n")
            continue

        print(f"  kind: {decoded.kind.value}")
        if decoded.destination is not None:
            for name, value in decoded.destination.model_dump().items():
                print(f"  {name}: {value}")
        for entry in decoded.chain_ids:
            label = entry.name or "unregistered"
            print(f"  -> chain {entry.id} ({label}, native id {entry.native_id})")
        print()


if __name__ == "__main__":
    main()
