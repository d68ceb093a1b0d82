"""Bor receipt keys, receipt-root rules, system-transaction gas, table names and stores."""