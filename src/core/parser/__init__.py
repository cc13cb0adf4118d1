"""Command parsing.

Flow: raw line -> command word + arguments -> tokenizer -> field parser ->
value objects -> command.
"""
