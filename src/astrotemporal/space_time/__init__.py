"""Calendar, decimal time and Julian day conversions."""
