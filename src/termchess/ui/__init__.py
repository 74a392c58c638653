"""Terminal front end: rendering, key decoding and the driving loop."""
