"""Host adapters binding the engine to concrete editor widgets."""
