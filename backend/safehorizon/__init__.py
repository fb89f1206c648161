"""SafeHorizon localization backend."""
