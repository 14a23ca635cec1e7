"""
Position state machine module.

Tracks a single binary position through Flat -> Open -> Flat. Entry is gated
by the current signal; exits fire on take-profit, stop-loss, momentum fade
or an explicit close.
"""
