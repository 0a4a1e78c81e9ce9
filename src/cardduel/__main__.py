from cardduel.presentation.cli.app import main

main()
