# Default fields of a new document in the mflix users collection
user_fields = {
    "name": None,  # str - display name
    "email": None,  # str - contact address
    "genre": [],  # list of str - favourite genres
    "movies_watched": 0,  # int - watched movies counter
}
