"""Client for the Hetzner DNS API: zones and records."""