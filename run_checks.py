from fastapi.testclient import TestClient
from residents.main import app

client = TestClient(app)

print('ROOT:')
print(client.get('/').json())

print('\nHEALTH:')
print(client.get('/health').json())

print('\nCATALOG HEALTH:')
resp = client.get('/health/catalog')
print(resp.status_code)
print(resp.json())

print('\nSEARCH "pothole":')
for topic in client.get('/issue-topics/search', params={'q': 'pothole'}).json()['results']:
    print(f"  {topic['id']} {topic['title']} -> {topic['department']}")

print('\nDEPARTMENTS:')
for dept in client.get('/departments').json():
    print(f"  {dept['name']}: {dept['head']} <{dept['email']}>")
