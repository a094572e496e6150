"""Web adapter — HTTP surface for the notifier."""
