"""IPFS pinning services used to store NFT media and metadata.

``endpoints`` lists the documented API calls; the IPFS console picks its
auth probe from them when a provider has no dedicated auth-test URL.
"""

from __future__ import annotations

from currency_core.schemas import ApiEndpoint, Category, ServiceInfo, SocialLinks

PINATA = ServiceInfo(
    id="pinata",
    name="Pinata",
    category=Category.IPFS,
    website="https://www.pinata.cloud/",
    description="Managed IPFS pinning with dedicated gateways",
    api_base_url="https://api.pinata.cloud",
    docs_url="https://docs.pinata.cloud/",
    social=SocialLinks(twitter="https://twitter.com/pinatacloud", discord="https://discord.gg/pinata"),
    features=("pin file", "pin json", "dedicated gateway"),
    fees={"free_tier": "1 GB"},
    notes=("Gateway: https://gateway.pinata.cloud/ipfs",),
    auth_required=True,
    endpoints=(
        ApiEndpoint(name="pin file", path="/pinning/pinFileToIPFS", method="POST"),
        ApiEndpoint(name="pin json", path="/pinning/pinJSONToIPFS", method="POST"),
        ApiEndpoint(name="test authentication", path="/data/testAuthentication"),
        ApiEndpoint(name="pin list", path="/data/pinList"),
    ),
)

INFURA = ServiceInfo(
    id="infura",
    name="Infura IPFS",
    category=Category.IPFS,
    website="https://www.infura.io/",
    description="IPFS HTTP API behind project id / secret Basic auth",
    api_base_url="https://ipfs.infura.io:5001",
    docs_url="https://docs.infura.io/api/networks/ipfs",
    social=SocialLinks(twitter="https://twitter.com/infura_io"),
    auth_required=True,
    endpoints=(
        ApiEndpoint(name="add", path="/api/v0/add", method="POST"),
        ApiEndpoint(name="pin ls", path="/api/v0/pin/ls", method="POST"),
        ApiEndpoint(name="version", path="/api/v0/version", method="POST"),
    ),
)

FILEBASE = ServiceInfo(
    id="filebase",
    name="Filebase",
    category=Category.IPFS,
    website="https://filebase.com/",
    description="S3-compatible object storage backed by IPFS",
    api_base_url="https://api.filebase.io/v1/ipfs",
    docs_url="https://docs.filebase.com/",
    social=SocialLinks(twitter="https://twitter.com/filebase"),
    notes=("Gateway: https://ipfs.filebase.io/ipfs",),
    auth_required=True,
    endpoints=(
        ApiEndpoint(name="add pin", path="/pins", method="POST"),
        ApiEndpoint(name="list pins", path="/pins"),
    ),
)

LIGHTHOUSE = ServiceInfo(
    id="lighthouse",
    name="Lighthouse",
    category=Category.IPFS,
    website="https://www.lighthouse.storage/",
    description="Perpetual storage on IPFS and Filecoin",
    api_base_url="https://node.lighthouse.storage",
    docs_url="https://docs.lighthouse.storage/",
    social=SocialLinks(twitter="https://twitter.com/LighthouseWeb3"),
    notes=("Gateway: https://gateway.lighthouse.storage/ipfs",),
    auth_required=True,
    endpoints=(
        ApiEndpoint(name="upload", path="/api/v0/add", method="POST"),
    ),
)

NFT_STORAGE = ServiceInfo(
    id="nftstorage",
    name="NFT.Storage",
    category=Category.IPFS,
    website="https://nft.storage/",
    description="Long-term NFT data preservation on IPFS and Filecoin",
    api_base_url="https://api.nft.storage",
    docs_url="https://app.nft.storage/v1/docs/intro",
    social=SocialLinks(twitter="https://twitter.com/nft_storage"),
    notes=("Gateway: https://nftstorage.link/ipfs",),
    auth_required=True,
    endpoints=(
        ApiEndpoint(name="upload", path="/upload", method="POST"),
        ApiEndpoint(name="store", path="/store", method="POST"),
        ApiEndpoint(name="status", path="/{cid}"),
    ),
)

STORACHA = ServiceInfo(
    id="storacha",
    name="Storacha",
    category=Category.IPFS,
    website="https://storacha.network/",
    description="Decentralized hot storage, formerly web3.storage",
    api_base_url="https://up.web3.storage",
    docs_url="https://docs.storacha.network/",
    social=SocialLinks(twitter="https://twitter.com/storachanetwork"),
    auth_required=True,
    endpoints=(
        ApiEndpoint(name="user", path="/user"),
        ApiEndpoint(name="upload", path="/upload", method="POST"),
    ),
)

CRUST = ServiceInfo(
    id="crust",
    name="Crust Network",
    category=Category.IPFS,
    website="https://crust.network/",
    description="Incentivised IPFS pinning layer on Polkadot",
    api_base_url="https://gw-seattle.crustcloud.io",
    docs_url="https://wiki.crust.network/docs/en/buildGettingStarted",
    social=SocialLinks(twitter="https://twitter.com/CrustNetwork"),
    notes=("Gateway: https://ipfs-gw.crust.network/ipfs",),
    auth_required=True,
    endpoints=(
        ApiEndpoint(name="add", path="/api/v0/add", method="POST"),
        ApiEndpoint(name="pin status", path="/psa/pins"),
    ),
)

FLEEK = ServiceInfo(
    id="fleek",
    name="Fleek",
    category=Category.IPFS,
    website="https://fleek.xyz/",
    description="Edge-optimised IPFS hosting and storage",
    api_base_url="https://api.fleek.xyz",
    docs_url="https://fleek.xyz/docs/",
    social=SocialLinks(twitter="https://twitter.com/fleek"),
    notes=("Gateway: https://ipfs.fleek.co/ipfs",),
    auth_required=True,
    endpoints=(
        ApiEndpoint(name="upload", path="/api/v1/storage/upload", method="POST"),
        ApiEndpoint(name="list files", path="/api/v1/storage/files"),
    ),
)

IPFS_PROVIDERS: tuple[ServiceInfo, ...] = (
    CRUST,
    FILEBASE,
    FLEEK,
    INFURA,
    LIGHTHOUSE,
    NFT_STORAGE,
    PINATA,
    STORACHA,
)
