from user_directory.main import main

main()
