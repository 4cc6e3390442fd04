"""Bank App: accounts, deposits, withdrawals, transfers and history."""
