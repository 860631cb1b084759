from gitrelease.cli.app import main

main()
