from lit_modelfile.cli import main

main()
