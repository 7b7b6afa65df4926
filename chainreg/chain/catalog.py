"""Built-in catalog of well-known networks and their public RPC endpoints."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogEntry:
    alias: str
    name: str
    chain_id: int
    default_rpc_url: str


# Seeding walks this table in order.
DEFAULT_CATALOG: tuple[CatalogEntry, ...] = (
    CatalogEntry("anvil", "Anvil", 31337, "http://127.0.0.1:8545"),
    CatalogEntry("mainnet", "Mainnet", 1, "https://eth.llamarpc.com"),
    CatalogEntry("sepolia", "Sepolia", 11155111, "https://ethereum-sepolia-rpc.publicnode.com"),
    CatalogEntry("holesky", "Holesky", 17000, "https://rpc.holesky.ethpandaops.io"),
    CatalogEntry("hoodi", "Hoodi", 560048, "https://rpc.hoodi.ethpandaops.io"),
    CatalogEntry("optimism", "Optimism", 10, "https://mainnet.optimism.io"),
    CatalogEntry("optimism_sepolia", "Optimism Sepolia", 11155420, "https://sepolia.optimism.io"),
    CatalogEntry("arbitrum_one", "Arbitrum One", 42161, "https://arb1.arbitrum.io/rpc"),
    CatalogEntry("arbitrum_one_sepolia", "Arbitrum One Sepolia", 421614, "https://sepolia-rollup.arbitrum.io/rpc"),
    CatalogEntry("arbitrum_nova", "Arbitrum Nova", 42170, "https://nova.arbitrum.io/rpc"),
    CatalogEntry("polygon", "Polygon", 137, "https://polygon-rpc.com"),
    CatalogEntry("polygon_amoy", "Polygon Amoy", 80002, "https://rpc-amoy.polygon.technology"),
    CatalogEntry("avalanche", "Avalanche", 43114, "https://api.avax.network/ext/bc/C/rpc"),
    CatalogEntry("avalanche_fuji", "Avalanche Fuji", 43113, "https://api.avax-test.network/ext/bc/C/rpc"),
    CatalogEntry("bnb_smart_chain", "BNB Smart Chain", 56, "https://bsc-dataseed1.binance.org"),
    CatalogEntry("bnb_smart_chain_testnet", "BNB Smart Chain Testnet", 97, "https://rpc.ankr.com/bsc_testnet_chapel"),
    CatalogEntry("gnosis_chain", "Gnosis Chain", 100, "https://rpc.gnosischain.com"),
    CatalogEntry("moonbeam", "Moonbeam", 1284, "https://rpc.api.moonbeam.network"),
    CatalogEntry("moonriver", "Moonriver", 1285, "https://rpc.api.moonriver.moonbeam.network"),
    CatalogEntry("moonbase", "Moonbase", 1287, "https://rpc.testnet.moonbeam.network"),
    CatalogEntry("base_sepolia", "Base Sepolia", 84532, "https://sepolia.base.org"),
    CatalogEntry("base", "Base", 8453, "https://mainnet.base.org"),
    CatalogEntry("blast_sepolia", "Blast Sepolia", 168587773, "https://sepolia.blast.io"),
    CatalogEntry("blast", "Blast", 81457, "https://rpc.blast.io"),
    CatalogEntry("fantom_opera", "Fantom Opera", 250, "https://rpc.ankr.com/fantom/"),
    CatalogEntry("fantom_opera_testnet", "Fantom Opera Testnet", 4002, "https://rpc.ankr.com/fantom_testnet/"),
    CatalogEntry("fraxtal", "Fraxtal", 252, "https://rpc.frax.com"),
    CatalogEntry("fraxtal_testnet", "Fraxtal Testnet", 2522, "https://rpc.testnet.frax.com"),
    CatalogEntry("berachain_bartio_testnet", "Berachain bArtio Testnet", 80084, "https://bartio.rpc.berachain.com"),
    CatalogEntry("flare", "Flare", 14, "https://flare-api.flare.network/ext/C/rpc"),
    CatalogEntry("flare_coston2", "Flare Coston2", 114, "https://coston2-api.flare.network/ext/C/rpc"),
    CatalogEntry("mode", "Mode", 34443, "https://mode.drpc.org"),
    CatalogEntry("mode_sepolia", "Mode Sepolia", 919, "https://sepolia.mode.network"),
    CatalogEntry("zora", "Zora", 7777777, "https://zora.drpc.org"),
    CatalogEntry("zora_sepolia", "Zora Sepolia", 999999999, "https://sepolia.rpc.zora.energy"),
    CatalogEntry("race", "Race", 6805, "https://racemainnet.io"),
    CatalogEntry("race_sepolia", "Race Sepolia", 6806, "https://racemainnet.io"),
    CatalogEntry("metal", "Metal", 1750, "https://metall2.drpc.org"),
    CatalogEntry("metal_sepolia", "Metal Sepolia", 1740, "https://testnet.rpc.metall2.com"),
    CatalogEntry("binary", "Binary", 624, "https://rpc.zero.thebinaryholdings.com"),
    CatalogEntry("binary_sepolia", "Binary Sepolia", 625, "https://rpc.zero.thebinaryholdings.com"),
    CatalogEntry("orderly", "Orderly", 291, "https://rpc.orderly.network"),
    CatalogEntry("orderly_sepolia", "Orderly Sepolia", 4460, "https://testnet-rpc.orderly.org"),
    CatalogEntry("unichain", "Unichain", 130, "https://mainnet.unichain.org"),
    CatalogEntry("unichain_sepolia", "Unichain Sepolia", 1301, "https://sepolia.unichain.org"),
)

CATALOG_BY_ALIAS: dict[str, CatalogEntry] = {entry.alias: entry for entry in DEFAULT_CATALOG}
