"""
Example: Read USDC metadata and a balance in one round trip

Usage:
    MAINNET_RPC_URL=https://... python -m examples.usdc_info.main
"""

import sys

from multix import ContractABI, Multicall3, Output, Web3Client, as_address

from .config import HOLDER_ADDRESS, MAINNET_RPC_URL, MULTICALL3_ADDRESS, USDC_ADDRESS

ERC20_ABI = """[
    {"constant": true, "inputs": [], "name": "symbol", "outputs": [{"internalType": "string", "name": "", "type": "string"}], "payable": false, "stateMutability": "view", "type": "function"},
    {"constant": true, "inputs": [], "name": "decimals", "outputs": [{"internalType": "uint8", "name": "", "type": "uint8"}], "payable": false, "stateMutability": "view", "type": "function"},
    {"constant": true, "inputs": [{"internalType": "address", "name": "", "type": "address"}], "name": "balanceOf", "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}], "payable": false, "stateMutability": "view", "type": "function"}
]"""


def main():
    if not MAINNET_RPC_URL:
        sys.exit("MAINNET_RPC_URL environment variable is required")

    erc20 = ContractABI.from_json(ERC20_ABI)
    multicall = Multicall3(MULTICALL3_ADDRESS, Web3Client.from_url(MAINNET_RPC_URL))

    symbol = Output(str)
    decimals = Output(int)
    balance = Output(int)

    block = (
        multicall.new_caller()
        .add_by_abi(USDC_ADDRESS, erc20, "symbol", symbol)
        .add_by_abi(USDC_ADDRESS, erc20, "decimals", decimals)
        .add_by_abi(USDC_ADDRESS, erc20, "balanceOf", balance, as_address(HOLDER_ADDRESS))
        .aggregate()
    )

    print(f"Block: {block}")
    print(f"USDC Symbol: {symbol.value}")
    print(f"USDC Decimals: {decimals.value}")
    print(f"{HOLDER_ADDRESS} {symbol.value} balance: {balance.value}")


if __name__ == "__main__":
    main()
