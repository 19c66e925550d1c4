"""Market conventions: enumerations, day counts and business day calendars."""
