from termenv.cli.main import main

main()
