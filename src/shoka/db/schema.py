# ABOUTME: SQL DDL statements for the Shoka catalog database schema.
# ABOUTME: Defines the books table, its lookup and listing indexes, and the schema version.

SCHEMA_V1 = """
-- Core book catalog table; ids are opaque UUID strings
CREATE TABLE books (
    id            TEXT PRIMARY KEY,
    title         TEXT NOT NULL,
    author        TEXT,
    publisher     TEXT,
    publish_date  TEXT,
    pages         INTEGER,
    description   TEXT,
    category      TEXT,
    isbn          TEXT,
    image_url     TEXT,
    language      TEXT,
    source        TEXT,
    location      TEXT NOT NULL,
    added_at      TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ', 'now')),
    updated_at    TEXT
);

CREATE INDEX idx_books_isbn ON books(isbn) WHERE isbn IS NOT NULL;
CREATE INDEX idx_books_location ON books(location);
CREATE INDEX idx_books_added_at ON books(added_at);

-- Version of the layout above, recorded once per catalog file
CREATE TABLE schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

INSERT INTO schema_version (version) VALUES (1);
"""

