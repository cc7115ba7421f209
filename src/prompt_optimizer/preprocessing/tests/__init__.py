"""
Test suite for the prompt analysis pipeline.

Covers the individual components and their composition:
- Domain classification order
- Clarity factor scoring
- Risk flag detection
- Question generation
- Prompt assembly and the end-to-end record
"""
