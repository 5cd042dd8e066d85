"""Bank of Canada Commodity Price Index dashboard."""
