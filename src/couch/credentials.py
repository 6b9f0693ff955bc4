url = "http://localhost:5984"
username = "admin"
password = "password"
