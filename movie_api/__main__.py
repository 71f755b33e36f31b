from movie_api.main import serve

serve()
