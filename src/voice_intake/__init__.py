"""
Voice vacancy intake.

Transcribes a recorded job-vacancy description, extracts the vacancy fields
with a generative model and, when information is missing, synthesizes a
spoken follow-up question.
"""
