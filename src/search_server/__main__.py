from search_server.cli import main

main()
