"""Game round state machine.

Responsibilities:
  - Drive the two-state guess/reveal loop over the classifier and generator.
  - Must not render anything; callers own display.
"""
