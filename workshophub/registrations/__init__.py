"""Registration ledger: participant sign-ups and cancellations."""
