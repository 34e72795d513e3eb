"""Pure tools used by the detectors and the table extractor."""
