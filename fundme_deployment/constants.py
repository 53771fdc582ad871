from pathlib import Path

import fundme_deployment

#
# Filesystem
#

DEPLOYMENT_DIR = Path(fundme_deployment.__file__).parent
NETWORK_CONFIG_FILEPATH = DEPLOYMENT_DIR / "network_config.yml"
ARTIFACTS_DIR = DEPLOYMENT_DIR / "artifacts"
REGISTRY_FILEPATH = ARTIFACTS_DIR / "deployments.json"

#
# Networks
#

HARDHAT = "hardhat"
LOCALHOST = "localhost"
LOCAL = "local"

DEVELOPMENT_CHAINS = (HARDHAT, LOCALHOST, LOCAL)

DEFAULT_BLOCK_CONFIRMATIONS = 1

ETHERSCAN_API_KEY_ENVVAR = "ETHERSCAN_API_KEY"

#
# Contracts
#

FUND_ME = "FundMe"
MOCK_PRICE_FEED = "MockV3Aggregator"

# network config field holding the production price feed address
PRICE_FEED_FIELD = "ethUsdPriceFeed"

TAGS = ("all", "fundme")
