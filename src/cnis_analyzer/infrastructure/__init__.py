"""Infrastructure: analysis service client, documents and reports."""
