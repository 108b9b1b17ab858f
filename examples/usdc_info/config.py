from dotenv import load_dotenv
import os

load_dotenv()

MAINNET_RPC_URL = os.getenv("MAINNET_RPC_URL", "")
MULTICALL3_ADDRESS = os.getenv("MULTICALL3_ADDRESS", "0xcA11bde05977b3631167028862bE2a173976CA11")
USDC_ADDRESS = os.getenv("USDC_ADDRESS", "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48")
HOLDER_ADDRESS = os.getenv("HOLDER_ADDRESS", "0xd166B8Fca31A21962AAE30EBaaA2B5464e8Ea2B3")
