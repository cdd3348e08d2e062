"""HTML fragments for accounts, records and zones, and the page renderer."""