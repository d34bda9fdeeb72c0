from .markov_chain.generate import main

if __name__ == '__main__':
    main(prog_name='markovgen')
