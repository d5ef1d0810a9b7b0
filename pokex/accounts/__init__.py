from pokex.accounts.account import Account
