# Ledger account that holds staked principal and undistributed rewards.
POOL_ACCOUNT_ID = "STAKING_POOL"
