"""
Services Layer - Transport Decorators and the Interview Driver

Composes replay, meta-command and compacting decorators around a transcript
medium and runs build or display passes over the result.
"""
