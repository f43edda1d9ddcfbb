"""JSON and encrypted SQL column types and a row scanner for DB-API cursors."""