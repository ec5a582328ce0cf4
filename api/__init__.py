"""HTTP-Einstiegspunkt fuer die Steuerung des Log-Uploads."""
